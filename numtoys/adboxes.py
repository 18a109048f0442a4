"""Coloured boxes showing the parity pattern of the arithmetic derivative."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def is_prime(n: int) -> bool:
    """Trial-division primality test by 6k +/- 1 candidates (meant for n >= 2)."""
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def arithmetic_derivative(n: int) -> int:
    """Return the arithmetic derivative n' of a non-negative integer."""
    if n < 2:
        return 0
    if is_prime(n):
        return 1

    original = n
    result = 0
    i = 2
    while i * i <= n:
        if n % i == 0:
            exponent = 0
            while n % i == 0:
                n //= i
                exponent += 1
            result += exponent * original // i
        i += 1
    if n > 1:
        result += original // n
    return result


def shades(base: int) -> list[int]:
    """Return the evenly spaced colour intensities used for each residue."""
    if base < 2:
        raise ValueError("base must be at least 2")
    step = 255 // (base - 1)
    return [step * i for i in range(base)]


def render(base: int = 2, columns: int = 32, max_n: int = 2048) -> str:
    """Render the grid of derivative residues as ANSI true-colour boxes."""
    if columns < 1:
        raise ValueError("columns must be positive")
    if max_n < 0:
        raise ValueError("max_n must not be negative")
    palette = shades(base)

    parts = ["".join(f"{i:<2d}" for i in range(1, columns + 1)), "\n"]
    line_no = 1
    for n in range(1, max_n + 1):
        shade = palette[arithmetic_derivative(n) % base]
        parts.append(f"\x1b[48;2;255;{shade};{shade}m  \x1b[0m")
        if n % columns == 0:
            parts.append(f"{line_no}\n")
            line_no += 1
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw the arithmetic derivative modulo a base as coloured boxes."
    )
    parser.add_argument("--base", type=int, default=2)
    parser.add_argument("--columns", type=int, default=32)
    parser.add_argument("--max-n", type=int, default=2048)
    args = parser.parse_args(argv)
    try:
        output = render(args.base, args.columns, args.max_n)
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())