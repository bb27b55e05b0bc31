import logging
import uuid
import weakref
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .peer import SimulatedPeer

logger = logging.getLogger(__name__)


class PeerRegistry:
    """
    Allocates peer ids and looks peers up by id.

    Peers which share a registry can find each other. The registry only
    holds weak references, peers go away once nothing else uses them.
    """

    def __init__(self) -> None:
        self.__count = 0
        self._id = str(uuid.uuid4())
        self.__peers: "weakref.WeakValueDictionary[int, SimulatedPeer]" = (
            weakref.WeakValueDictionary()
        )

    @property
    def id(self) -> str:
        """
        An automatically generated globally unique ID, carried by the
        descriptions of the peers in this registry.
        """
        return self._id

    def __contains__(self, peerId: object) -> bool:
        return peerId in self.__peers

    def __len__(self) -> int:
        return len(self.__peers)

    def get(self, peerId: int) -> Optional["SimulatedPeer"]:
        return self.__peers.get(peerId)

    def register(self, peer: "SimulatedPeer") -> int:
        self.__count += 1
        self.__peers[self.__count] = peer
        logger.debug("PeerRegistry() registered peer %d", self.__count)
        return self.__count
