"""Hamming(7,4) encoding with single-bit error correction.

Codewords are written most significant position first: the leftmost
character is position 7 and the rightmost is position 1.
"""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence, Union

Bits = Union[str, Iterable[int]]


def _to_bits(value: Bits, length: int, name: str) -> list[int]:
    if isinstance(value, str):
        value = value.replace(" ", "")
        if set(value) - {"0", "1"}:
            raise ValueError(f"{name} must contain only 0 and 1: {value!r}")
        bits = [int(ch) for ch in value]
    else:
        bits = list(value)
        if any(bit not in (0, 1) for bit in bits):
            raise ValueError(f"{name} must contain only 0 and 1")
    if len(bits) != length:
        raise ValueError(f"{name} must have {length} bits, got {len(bits)}")
    return bits


def _positions(code: Bits) -> list[int]:
    """Return bits indexed so that element ``k`` is position ``k + 1``."""
    return _to_bits(code, 7, "code")[::-1]


def _render(h: list[int]) -> str:
    return "".join(str(bit) for bit in reversed(h))


def encode(data: Bits) -> str:
    """Encode four data bits into a seven-bit Hamming codeword."""
    d = _to_bits(data, 4, "data")
    h = [0] * 7
    h[6], h[5], h[4], h[2] = d
    h[0] = h[2] ^ h[4] ^ h[6]
    h[1] = h[2] ^ h[5] ^ h[6]
    h[3] = h[4] ^ h[5] ^ h[6]
    return _render(h)


def syndrome(code: Bits) -> int:
    """Return the position (1-7) of a single-bit error, or 0 when none is found."""
    h = _positions(code)
    p1 = h[0] ^ h[2] ^ h[4] ^ h[6]
    p2 = h[1] ^ h[2] ^ h[5] ^ h[6]
    p3 = h[3] ^ h[4] ^ h[5] ^ h[6]
    return (p3 << 2) | (p2 << 1) | p1


def correct(code: Bits) -> tuple[str, int]:
    """Return the corrected codeword and the error position (0 if there was none)."""
    h = _positions(code)
    position = syndrome(code)
    if position:
        h[position - 1] ^= 1
    return _render(h), position


def main(argv: Sequence[str] | None = None) -> int:
    """Encode data bits and optionally check a received codeword."""
    parser = argparse.ArgumentParser(
        prog="netlab-hamming", description="Hamming(7,4) encoder and corrector."
    )
    parser.add_argument("data", help="four data bits, e.g. 1011")
    parser.add_argument("received", nargs="?", help="seven received bits, e.g. 1011111")
    args = parser.parse_args(argv)

    try:
        print(f"Hamming: {encode(args.data)}")
        if args.received is None:
            return 0
        fixed, position = correct(args.received)
    except ValueError as exc:
        parser.error(str(exc))

    if position:
        print(f"Error at {position}")
    else:
        print("No errors detected.")
    print(f"Code: {fixed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())