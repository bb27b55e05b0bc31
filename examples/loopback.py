import argparse
import asyncio
import logging

from mockjsep import (
    ManualScheduler,
    MockMediaStream,
    PeerRegistry,
    SimulatedPeer,
    add_scheduler_arguments,
    create_scheduler,
    negotiate,
)


def peer_log(pc, *args):
    print(f"peer({pc.id})", *args)


async def run(scheduler, streams):
    registry = PeerRegistry()

    def on_candidate(candidate, more):
        peer_log(pc1, "candidate", candidate.toSdp(), candidate.label)
        pc2.processIceMessage(candidate)

    pc1 = SimulatedPeer("dummy arg", on_candidate, registry=registry, scheduler=scheduler)
    pc2 = SimulatedPeer("dummy arg", registry=registry, scheduler=scheduler)

    for pc in (pc1, pc2):

        @pc.on("open")
        def on_open(pc=pc):
            peer_log(pc, "open, remote is", pc.remote.id)

        @pc.on("addstream")
        def on_addstream(event, pc=pc):
            peer_log(pc, "stream added", event.stream.label)

    for i in range(streams):
        pc1.addStream(MockMediaStream(label=f"stream-{i}"))

    offer, answer = negotiate(pc1, pc2)
    print(offer.toSdp())
    print(answer.toSdp())

    if isinstance(scheduler, ManualScheduler):
        scheduler.drain()
    else:
        await asyncio.sleep(0.1)

    pc1.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulated peer loopback")
    parser.add_argument("--streams", type=int, default=1, help="Number of streams")
    parser.add_argument("--verbose", "-v", action="count")
    add_scheduler_arguments(parser)
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    asyncio.run(run(create_scheduler(args.scheduler), args.streams))
