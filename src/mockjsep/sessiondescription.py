from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MockIceCandidate:
    """
    The :class:`MockIceCandidate` is a synthetic ICE candidate.
    """

    sdp: str = "a=candidate:Fake candidate"
    "The candidate in SDP form."
    label: str = "first"
    "The media line this candidate belongs to."

    def toSdp(self) -> str:
        return self.sdp


@dataclass
class MockSessionDescription:
    """
    The :class:`MockSessionDescription` fakes one end of a connection.

    `peerId` identifies the peer which created the description and
    `registryId` the :class:`PeerRegistry` that peer belongs to, so that the
    receiving peer can find its counterpart.
    """

    sdp: str
    peerId: Optional[int] = None
    registryId: Optional[str] = None

    @classmethod
    def describe(
        cls,
        kind: str,
        peerId: int,
        streamCount: int,
        registryId: Optional[str] = None,
    ) -> "MockSessionDescription":
        return cls(
            sdp=(
                f"Fake session description of {kind} from {peerId} "
                f"with {streamCount} streams"
            ),
            peerId=peerId,
            registryId=registryId,
        )

    def toSdp(self) -> str:
        return self.sdp

    def addCandidate(self, candidate: MockIceCandidate) -> None:
        self.sdp += candidate.toSdp()
