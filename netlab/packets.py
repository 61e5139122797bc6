"""Split a message into numbered packets, deliver them out of order and reassemble."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Sequence

FRAME_SIZE = 3


@dataclass(frozen=True)
class Packet:
    """A numbered fragment of a message; sequence numbers start at 1."""

    seq: int
    data: str


def split_message(message: str, size: int = FRAME_SIZE) -> list[Packet]:
    """Cut ``message`` into packets of at most ``size`` characters."""
    if size <= 0:
        raise ValueError(f"packet size must be positive, got {size}")
    return [
        Packet(seq, message[start:start + size])
        for seq, start in enumerate(range(0, len(message), size), start=1)
    ]


def shuffle_packets(
    packets: Iterable[Packet], rng: random.Random | None = None
) -> list[Packet]:
    """Return the packets in a random order, as if delivered by an unordered network."""
    result = list(packets)
    (rng or random.Random()).shuffle(result)
    return result


def reassemble(packets: Iterable[Packet]) -> str:
    """Put packets back in sequence order and join their data."""
    return "".join(packet.data for packet in sorted(packets, key=attrgetter("seq")))


def _ids(packets: Sequence[Packet]) -> str:
    return " ".join(str(packet.seq) for packet in packets)


def main(argv: Sequence[str] | None = None) -> int:
    """Split a message, shuffle the packets and show the reassembled result."""
    parser = argparse.ArgumentParser(
        prog="netlab-packets",
        description="Simulate out-of-order packet delivery and reassembly.",
    )
    parser.add_argument("message", nargs="*", help="message to transmit")
    parser.add_argument("--size", type=int, default=FRAME_SIZE, help="characters per packet")
    parser.add_argument("--seed", type=int, help="seed for the delivery order")
    args = parser.parse_args(argv)

    message = " ".join(args.message) if args.message else input("Msg: ")
    message = message.rstrip("\n")
    try:
        packets = split_message(message, args.size)
    except ValueError as exc:
        parser.error(str(exc))

    print("Packet No.  Data\n")
    for packet in packets:
        print(f"{packet.seq}:{packet.data}")

    received = shuffle_packets(packets, random.Random(args.seed))
    ordered = sorted(received, key=attrgetter("seq"))

    print(f"\nPackets Received: {_ids(received)}")
    print(f"Packets in order: {_ids(ordered)}")
    print(f"\nReconstructed Message: {reassemble(received)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())