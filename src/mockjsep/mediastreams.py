import uuid

from pyee.asyncio import AsyncIOEventEmitter


class MockMediaStream(AsyncIOEventEmitter):
    """
    An inert media stream handle.

    It carries no media, it only knows whether it has been stopped.
    """

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.__ended = False
        self._id = str(uuid.uuid4())
        self.label = label

    @property
    def id(self) -> str:
        """
        An automatically generated globally unique ID.
        """
        return self._id

    @property
    def readyState(self) -> str:
        return "ended" if self.__ended else "live"

    def stop(self) -> None:
        if not self.__ended:
            self.__ended = True
            self.emit("ended")

            # no more events will be emitted, so remove all event listeners
            # to facilitate garbage collection.
            self.remove_all_listeners()
