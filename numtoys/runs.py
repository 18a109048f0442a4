"""Longest runs in the glibc rand() sequence, one bit per seed."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence

_MASK32 = (1 << 32) - 1
_DEGREE = 31
_SEPARATION = 3
_DISCARD = 310


class GlibcRandom:
    """The additive feedback generator behind glibc's srand()/rand()."""

    def __init__(self, seed: int) -> None:
        word = seed & _MASK32
        if word == 0:
            word = 1
        state = [word]
        for _ in range(_DEGREE - 1):
            hi, lo = divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word)
        state.extend(state[:_SEPARATION])
        self._state = deque((w & _MASK32 for w in state), maxlen=_DEGREE + _SEPARATION)
        for _ in range(_DISCARD):
            self._step()

    def _step(self) -> int:
        value = (self._state[-_DEGREE] + self._state[-_SEPARATION]) & _MASK32
        self._state.append(value)
        return value

    def rand(self) -> int:
        """Return the next value in [0, 2**31)."""
        return self._step() >> 1


def find_longest_run(seed: int, modulus: int = 2, count: int = 255) -> int:
    """Return the value (mod modulus) forming the first longest run in count draws."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if count < 1:
        raise ValueError("count must be positive")
    rng = GlibcRandom(seed)
    previous = rng.rand() % modulus
    winner = previous
    current_run = max_run = 1
    for _ in range(count - 1):
        number = rng.rand() % modulus
        if number == previous:
            current_run += 1
            if current_run > max_run:
                max_run = current_run
                winner = number
        else:
            current_run = 1
        previous = number
    return winner


def runs_bitmap(start: int = 0, end: int = 64) -> int:
    """Set bit s to the binary longest-run value for each seed s in [start, end)."""
    if not 0 <= start <= end <= 64:
        raise ValueError("seeds must satisfy 0 <= start <= end <= 64")
    bits = 0
    for seed in range(start, end):
        bits |= find_longest_run(seed) << seed
    return bits


def main(argv: Sequence[str] | None = None) -> int:
    value = runs_bitmap(0, 64)
    if sys.byteorder == "big":
        value = int.from_bytes(value.to_bytes(8, "little"), "big")
    print(f"{value:016x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())