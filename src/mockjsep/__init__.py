# ruff: noqa: F401
import logging

from .events import MediaStreamEvent
from .exceptions import MockJsepError, SignalingMismatch
from .mediastreams import MockMediaStream
from .peer import SimulatedPeer, negotiate
from .registry import PeerRegistry
from .scheduler import (
    DeferredExecutionQueue,
    LiveScheduler,
    ManualScheduler,
    add_scheduler_arguments,
    create_scheduler,
)
from .sessiondescription import MockIceCandidate, MockSessionDescription

__version__ = "0.1.0"

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DeferredExecutionQueue",
    "LiveScheduler",
    "ManualScheduler",
    "MediaStreamEvent",
    "MockIceCandidate",
    "MockJsepError",
    "MockMediaStream",
    "MockSessionDescription",
    "PeerRegistry",
    "SignalingMismatch",
    "SimulatedPeer",
    "add_scheduler_arguments",
    "create_scheduler",
    "negotiate",
]
