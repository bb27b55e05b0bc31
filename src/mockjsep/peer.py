import logging
import re
import weakref
from collections.abc import Callable
from typing import Any, NoReturn, Optional

from pyee.asyncio import AsyncIOEventEmitter

from .events import MediaStreamEvent
from .exceptions import SignalingMismatch
from .registry import PeerRegistry
from .scheduler import DeferredExecutionQueue
from .sessiondescription import MockIceCandidate, MockSessionDescription

PEER_ID_RE = re.compile(r" from (\d+)")

logger = logging.getLogger(__name__)

IceCallback = Callable[[MockIceCandidate, bool], None]


def peer_id_from_description(desc: MockSessionDescription) -> Optional[int]:
    """
    Return the id of the peer which created `desc`, or `None`.

    The structured `peerId` field wins, the SDP text is only searched for
    descriptions which were rebuilt from text.
    """
    if desc.peerId is not None:
        return desc.peerId

    match = PEER_ID_RE.search(desc.toSdp())
    if match:
        return int(match.group(1))
    return None


class SimulatedPeer(AsyncIOEventEmitter):
    """
    The :class:`SimulatedPeer` is a fake JSEP peer connection.

    It produces fake offers and answers, pretends to gather a single ICE
    candidate and mirrors the local streams of the peer it is paired with.
    Everything the peer signals to its consumer goes through `scheduler`,
    so nothing is emitted before the triggering call has returned.

    Events: `open`, `addstream`, `removestream` and `icecandidate`.

    :param configuration: Ignored.
    :param iceCallback: Called with each new ICE candidate.
    :param registry: The :class:`PeerRegistry` used to find the remote peer.
    :param scheduler: The :class:`DeferredExecutionQueue` running callbacks.
    """

    def __init__(
        self,
        configuration: Any = None,
        iceCallback: Optional[IceCallback] = None,
        *,
        registry: PeerRegistry,
        scheduler: DeferredExecutionQueue,
    ) -> None:
        super().__init__()
        self.__iceCallback = iceCallback
        self.__iceState = "new"
        self.__registry = registry
        self.__remote: Optional[weakref.ReferenceType["SimulatedPeer"]] = None
        self.__scheduler = scheduler

        self.configuration = configuration
        self.localDescription: Optional[MockSessionDescription] = None
        self.localStreams: list[Any] = []
        self.remoteDescription: Optional[MockSessionDescription] = None
        self.remoteStreams: list[Any] = []

        self.__id = registry.register(self)
        self.__log_debug("constructed")

    @property
    def id(self) -> int:
        return self.__id

    @property
    def iceState(self) -> str:
        return self.__iceState

    @property
    def remote(self) -> Optional["SimulatedPeer"]:
        """
        The peer this one is paired with, once a remote description was set.
        """
        if self.__remote is None:
            return None
        return self.__remote()

    def addStream(self, stream: Any, hints: Any = None) -> None:
        """
        Add a stream to the streams published to the remote peer.

        The remote peer sees it the next time its remote description is set.
        """
        self.__log_debug("addStream")
        self.localStreams.append(stream)

    def close(self) -> None:
        """
        Stop all local streams.
        """
        self.__log_debug("close")
        for stream in self.localStreams:
            if stream is not None:
                stream.stop()

    def createAnswer(
        self, offer: MockSessionDescription, hints: Any = None
    ) -> MockSessionDescription:
        """
        Create an answer. The content of `offer` is not looked at.
        """
        self.__log_debug("createAnswer")
        return MockSessionDescription.describe(
            "answer",
            self.__id,
            len(self.localStreams),
            registryId=self.__registry.id,
        )

    def createOffer(self, hints: Any = None) -> MockSessionDescription:
        self.__log_debug("createOffer")
        return MockSessionDescription.describe(
            "offer",
            self.__id,
            len(self.localStreams),
            registryId=self.__registry.id,
        )

    def processIceMessage(self, candidate: MockIceCandidate) -> None:
        # candidates are not needed, there is no transport
        self.__log_debug("processIceMessage")

    def setLocalDescription(self, action: str, desc: MockSessionDescription) -> None:
        self.__log_debug("setLocalDescription(%s)", action)
        self.localDescription = desc

    def setRemoteDescription(self, action: str, desc: MockSessionDescription) -> None:
        """
        Change the remote description.

        The first successful call pairs this peer with the peer which created
        `desc` and schedules the `open` event. Every successful call then
        compares the remote streams with the paired peer's local streams and
        schedules `addstream` / `removestream` events for the differences.

        :raises SignalingMismatch: if `desc` does not name a known peer of the
                                  same registry, or names this peer.
        """
        self.__log_debug("setRemoteDescription(%s)", action)

        peerId = peer_id_from_description(desc)
        if peerId is None:
            self.__error("Failed to connect with peer: no peer id in description")
        if desc.registryId is not None and desc.registryId != self.__registry.id:
            self.__error(
                f"Failed to connect with peer: peer {peerId} is from another registry"
            )
        if peerId == self.__id:
            self.__error("Failed to connect with peer: description is our own")
        if self.__remote is None:
            remote = self.__registry.get(peerId)
            if remote is None:
                self.__error(f"Failed to connect with peer: unknown peer {peerId}")
        else:
            remote = self.__remote()
            if remote is None:
                self.__error("Failed to connect with peer: remote peer is gone")

        self.remoteDescription = desc
        if self.__remote is None:
            self.__log_debug("has %d as remote", peerId)
            self.__remote = weakref.ref(remote)
            self.__scheduler.schedule(lambda: self.emit("open"))

        self.__reconcileStreams(remote)

    def startIce(self, options: Any = None) -> None:
        """
        Start gathering, which produces a single fake candidate later on.
        """
        self.__log_debug("startIce")
        if self.__iceState != "new":
            return
        self.__setIceState("gathering")
        self.__scheduler.schedule(self.__provideCandidate)

    def __error(self, msg: str) -> NoReturn:
        logger.error(f"SimulatedPeer({self.__id}) {msg}")
        raise SignalingMismatch(msg)

    def __log_debug(self, msg: str, *args: object) -> None:
        logger.debug(f"SimulatedPeer({self.__id}) {msg}", *args)

    def __provideCandidate(self) -> None:
        self.__log_debug("providing candidate")
        self.__setIceState("completed")
        candidate = MockIceCandidate()
        if self.__iceCallback is not None:
            self.__iceCallback(candidate, False)
        self.emit("icecandidate", candidate)

    def __reconcileStreams(self, remote: "SimulatedPeer") -> None:
        published = remote.localStreams
        self.__log_debug("remote has %d streams", len(published))

        for i in range(max(len(self.remoteStreams), len(published))):
            if i == len(self.remoteStreams):
                self.remoteStreams.append(None)
            current = self.remoteStreams[i]
            wanted = published[i] if i < len(published) else None
            if current is wanted:
                continue

            if current is not None:
                self.__log_debug("removing stream %d", i)
                self.remoteStreams[i] = None
                self.__scheduleStreamEvent("removestream", current)
            if wanted is not None:
                self.__log_debug("adding stream %d", i)
                self.remoteStreams[i] = wanted
                self.__scheduleStreamEvent("addstream", wanted)

    def __scheduleStreamEvent(self, name: str, stream: Any) -> None:
        def signal() -> None:
            self.__log_debug("signalling %s", name)
            self.emit(name, MediaStreamEvent(stream=stream))

        self.__scheduler.schedule(signal)

    def __setIceState(self, state: str) -> None:
        self.__log_debug("iceState %s -> %s", self.__iceState, state)
        self.__iceState = state


def negotiate(
    offerer: SimulatedPeer, answerer: SimulatedPeer
) -> tuple[MockSessionDescription, MockSessionDescription]:
    """
    Run a complete offer / answer exchange between two peers and start ICE
    on both of them.
    """
    offer = offerer.createOffer()
    offerer.setLocalDescription("offer", offer)
    answerer.setRemoteDescription("offer", offer)

    answer = answerer.createAnswer(offer)
    answerer.setLocalDescription("answer", answer)
    offerer.setRemoteDescription("answer", answer)

    offerer.startIce()
    answerer.startIce()
    return offer, answer
