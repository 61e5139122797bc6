"""Cyclic redundancy check over strings of binary digits."""

from __future__ import annotations

import argparse
from typing import Sequence


def _check_bits(bits: str, name: str) -> None:
    if not bits:
        raise ValueError(f"{name} must not be empty")
    if set(bits) - {"0", "1"}:
        raise ValueError(f"{name} must contain only 0 and 1: {bits!r}")


def _xor(a: str, b: str) -> str:
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def _divide(bits: str, generator: str) -> str:
    """Return the remainder of the modulo-2 division of ``bits`` by ``generator``."""
    tail = generator[1:]
    remainder = bits[: len(generator) - 1]
    for bit in bits[len(generator) - 1:]:
        window = remainder + bit
        if window[0] == "1":
            window = window[0] + _xor(window[1:], tail)
        remainder = window[1:]
    return remainder


def crc_remainder(data: str, generator: str) -> str:
    """Compute the checksum of ``data``: ``len(generator) - 1`` bits."""
    _check_bits(data, "data")
    _check_bits(generator, "generator")
    return _divide(data + "0" * (len(generator) - 1), generator)


def append_checksum(data: str, generator: str) -> str:
    """Return the codeword: ``data`` followed by its checksum."""
    return data + crc_remainder(data, generator)


def flip_bit(codeword: str, position: int) -> str:
    """Invert the bit at zero-based ``position``."""
    _check_bits(codeword, "codeword")
    if not 0 <= position < len(codeword):
        raise IndexError(f"position {position} is outside the codeword of length {len(codeword)}")
    flipped = "1" if codeword[position] == "0" else "0"
    return codeword[:position] + flipped + codeword[position + 1:]


def detect_error(codeword: str, generator: str) -> bool:
    """Tell whether ``codeword`` leaves a non-zero remainder when divided by ``generator``."""
    _check_bits(codeword, "codeword")
    _check_bits(generator, "generator")
    if len(codeword) < len(generator):
        raise ValueError("codeword is shorter than the generator")
    return "1" in _divide(codeword, generator)


def main(argv: Sequence[str] | None = None) -> int:
    """Compute a CRC codeword and optionally test error detection."""
    parser = argparse.ArgumentParser(
        prog="netlab-crc", description="Compute a CRC checksum and simulate a bit error."
    )
    parser.add_argument("data", help="data bits, e.g. 11010011101100")
    parser.add_argument("generator", help="generator polynomial bits, e.g. 1011")
    parser.add_argument(
        "--error", type=int, metavar="POS", help="zero-based position of a bit to flip"
    )
    args = parser.parse_args(argv)

    try:
        checksum = crc_remainder(args.data, args.generator)
    except ValueError as exc:
        parser.error(str(exc))

    codeword = args.data + checksum
    print(f"Modified data: {args.data}{'0' * (len(args.generator) - 1)}")
    print(f"Checksum: {checksum}")
    print(f"Final codeword: {codeword}")

    if args.error is None:
        return 0
    try:
        received = flip_bit(codeword, args.error)
    except IndexError:
        print("Invalid position! Error insertion failed.")
        return 1
    print(f"Data with error: {received}")
    if detect_error(received, args.generator):
        print("Error detected in the received data.")
    else:
        print("No error detected in the received data.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())