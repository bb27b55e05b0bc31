from dataclasses import dataclass
from typing import Any


@dataclass
class MediaStreamEvent:
    """
    This event is fired on :class:`SimulatedPeer` when a stream published by
    the remote party is added or removed.
    """

    stream: Any
    "The stream handle associated with the event."
