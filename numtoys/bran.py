"""Packing eight bytes into a little-endian 64-bit integer and back."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

_WIDTH = 8


def pack(data: Iterable[int]) -> int:
    """Pack exactly eight bytes into an integer, first byte lowest."""
    raw = bytes(data)
    if len(raw) != _WIDTH:
        raise ValueError(f"expected {_WIDTH} bytes, got {len(raw)}")
    return int.from_bytes(raw, "little")


def unpack(packed: int) -> bytes:
    """Split a 64-bit unsigned integer into eight bytes, lowest first."""
    if not 0 <= packed < 1 << (8 * _WIDTH):
        raise ValueError("packed value must fit in 64 unsigned bits")
    return packed.to_bytes(_WIDTH, "little")


def format_bytes(data: Iterable[int]) -> str:
    """Format bytes as upper-case hex pairs, each followed by a space."""
    return "".join(f"{b:02X} " for b in bytes(data))


def main(argv: Sequence[str] | None = None) -> int:
    original = bytes(range(1, 9))
    out = sys.stdout
    out.write(format_bytes(original) + "\n")
    packed = pack(original)
    out.write(f"Packed: {packed}\n")
    out.write("Unpacked: " + format_bytes(unpack(packed)) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())