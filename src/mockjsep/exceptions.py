class MockJsepError(Exception):
    pass


class SignalingMismatch(MockJsepError):
    """
    Raised when a remote description cannot be correlated with a known peer.
    """
