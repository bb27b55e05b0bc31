import argparse
import asyncio
import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from typing import Optional

logger = logging.getLogger(__name__)

SCHEDULER_NAMES = ["live", "manual"]


class DeferredExecutionQueue(ABC):
    """
    Defers a callback so that it runs outside of the current call stack.
    """

    @abstractmethod
    def schedule(self, callback: Callable[[], None]) -> None: ...


class LiveScheduler(DeferredExecutionQueue):
    """
    Runs callbacks on an asyncio event loop, once the current turn has ended.

    Callbacks run in the order they were scheduled. If no `loop` is given,
    :meth:`schedule` must be called while an event loop is running.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(callback)


class ManualScheduler(DeferredExecutionQueue):
    """
    Queues callbacks until :meth:`drain` is called.

    This gives tests full control over when deferred work happens.
    """

    def __init__(self) -> None:
        self._queue: deque[Callable[[], None]] = deque()

    @property
    def pending(self) -> int:
        """
        The number of callbacks waiting to run.
        """
        return len(self._queue)

    def schedule(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)

    def drain(self) -> int:
        """
        Run queued callbacks, oldest first, until the queue is empty.

        Callbacks scheduled while draining are run too. Returns the number
        of callbacks which were run.
        """
        count = 0
        while self._queue:
            callback = self._queue.popleft()
            callback()
            count += 1
        if count:
            logger.debug("ManualScheduler() drained %d callback(s)", count)
        return count


def add_scheduler_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add scheduler arguments to an argparse.ArgumentParser.
    """
    parser.add_argument(
        "--scheduler",
        choices=SCHEDULER_NAMES,
        default="live",
        help="How deferred callbacks are run",
    )


def create_scheduler(name: str) -> DeferredExecutionQueue:
    """
    Create a scheduler by name, either "live" or "manual".
    """
    if name == "live":
        return LiveScheduler()
    elif name == "manual":
        return ManualScheduler()
    else:
        raise ValueError(
            f"'scheduler' must be in {SCHEDULER_NAMES} (got '{name}')"
        )
