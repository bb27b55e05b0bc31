import asyncio
import functools
import logging
import os
import unittest
from collections.abc import Callable, Coroutine
from typing import Any, Optional, ParamSpec

from mockjsep import ManualScheduler, PeerRegistry, SimulatedPeer

P = ParamSpec("P")


def asynctest(
    coro: Callable[P, Coroutine[None, None, None]],
) -> Callable[P, None]:
    @functools.wraps(coro)
    def wrap(*args: P.args, **kwargs: P.kwargs) -> None:
        asyncio.run(coro(*args, **kwargs))

    return wrap


async def run_pending(turns: int = 5) -> None:
    """
    Let the event loop run callbacks scheduled with call_soon, including
    callbacks which schedule further callbacks.
    """
    for _ in range(turns):
        await asyncio.sleep(0)


class PeerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = PeerRegistry()
        self.scheduler = ManualScheduler()

    def createPeer(self, iceCallback: Optional[Callable[..., Any]] = None) -> SimulatedPeer:
        return SimulatedPeer(
            "dummy arg",
            iceCallback,
            registry=self.registry,
            scheduler=self.scheduler,
        )


if os.environ.get("MOCKJSEP_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
