"""Leaky-bucket traffic shaping simulation."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Tick:
    """What happened to the bucket during one time unit."""

    time: int
    inserted: int = 0
    dropped: int = 0
    sent: int = 0
    in_bucket: int = 0


def simulate(
    arrivals: Iterable[tuple[int, int]], bucket_size: int, rate: int
) -> list[Tick]:
    """Run the bucket from time 1 until the last packet has arrived and the bucket is empty.

    ``arrivals`` holds ``(time, size)`` pairs in strictly increasing time order.
    A packet that would overflow the bucket is dropped whole; at most ``rate``
    bytes leave the bucket per time unit.
    """
    packets = [(int(time), int(size)) for time, size in arrivals]
    if bucket_size < 0:
        raise ValueError("bucket size must not be negative")
    if rate <= 0:
        raise ValueError("output rate must be positive")
    previous = 0
    for time, size in packets:
        if time <= previous:
            raise ValueError("arrival times must be positive and strictly increasing")
        if size < 0:
            raise ValueError("packet size must not be negative")
        previous = time

    queue = deque(packets)
    last = packets[-1][0] if packets else 0
    bucket = 0
    time = 1
    ticks: list[Tick] = []
    while time <= last or bucket > 0:
        inserted = dropped = 0
        if queue and queue[0][0] == time:
            _, size = queue.popleft()
            if bucket + size <= bucket_size:
                bucket += size
                inserted = size
            else:
                dropped = size
        sent = min(bucket, rate)
        bucket -= sent
        ticks.append(Tick(time, inserted, dropped, sent, bucket))
        time += 1
    return ticks


def _arrival(text: str) -> tuple[int, int]:
    time, sep, size = text.partition(":")
    try:
        if not sep:
            raise ValueError
        return int(time), int(size)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected TIME:SIZE, got {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate a leaky bucket and print each time step."""
    parser = argparse.ArgumentParser(
        prog="netlab-leaky-bucket", description="Leaky-bucket traffic shaping simulation."
    )
    parser.add_argument(
        "packets", nargs="+", type=_arrival, metavar="TIME:SIZE",
        help="packet arrivals in order of time",
    )
    parser.add_argument("--bucket-size", type=int, required=True, help="bucket capacity in bytes")
    parser.add_argument("--rate", type=int, required=True, help="bytes sent per time unit")
    args = parser.parse_args(argv)

    try:
        ticks = simulate(args.packets, args.bucket_size, args.rate)
    except ValueError as exc:
        parser.error(str(exc))

    for tick in ticks:
        print(f"Time {tick.time}")
        if tick.inserted:
            print(f"Inserted {tick.inserted} bytes")
        elif tick.dropped:
            print(f"Dropped {tick.dropped} bytes")
        print(f"Sent {tick.sent} bytes")
        print(f"In bucket: {tick.in_bucket}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())