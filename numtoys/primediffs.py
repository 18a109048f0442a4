"""Repeated finite differences of the sequence of primes."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import chain, compress, islice

DEFAULT_LIMIT = 1 << 30
DEFAULT_K_MAX = 1 << 13

_MASK32 = (1 << 32) - 1


@dataclass(frozen=True)
class DifferenceRow:
    k: int
    diff: int
    log_value: int


def small_sieve(limit: int) -> list[int]:
    """Return all primes up to and including limit (Eratosthenes)."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return list(compress(range(limit + 1), flags))


def _odd_sieve(n: int) -> bytearray:
    """Flags for the odd numbers 1, 3, 5, ... <= n; a set flag means prime."""
    size = (n + 1) // 2
    flags = bytearray([1]) * size
    if size:
        flags[0] = 0
    for p in small_sieve(max(math.isqrt(n), 2)):
        if p == 2:
            continue
        if p * p > n:
            break
        start = p * p // 2
        flags[start::p] = bytes(len(range(start, size, p)))
    return flags


def _primes_from_odd_sieve(n: int, flags: bytearray) -> Iterable[int]:
    return chain([2], compress(range(1, n + 1, 2), flags))


def generate_primes(n: int) -> list[int]:
    """Return all primes up to and including n using an odd-only sieve."""
    if n < 2:
        return []
    return list(_primes_from_odd_sieve(n, _odd_sieve(n)))


def forward_difference(values: Iterable[int]) -> int:
    """Return the (len-1)-th difference a0-a1 style, in wrapping 32-bit arithmetic.

    The result is reduced modulo 2**32 and read as a signed 32-bit integer.
    """
    items = list(values)
    if not items:
        raise ValueError("forward_difference needs at least one value")
    order = len(items) - 1
    total = 0
    coeff = 1
    for j, value in enumerate(items):
        term = coeff * value
        total = (total - term if j % 2 else total + term) & _MASK32
        coeff = coeff * (order - j) // (j + 1)
    return total - (1 << 32) if total >= 1 << 31 else total


def signed_log(diff: int) -> int:
    """Return sign(diff) * ln(1 + |diff|), truncated toward zero."""
    if diff == 0:
        return 0
    return int(math.copysign(math.log(1.0 + abs(diff)), diff))


def output_ks(k_max: int) -> list[int]:
    """Return the orders reported: powers of two up to k_max, then k_max."""
    ks = []
    k = 1
    while k <= k_max:
        ks.append(k)
        k *= 2
    if k_max >= 1 and ks[-1] != k_max:
        ks.append(k_max)
    return ks


def compute(primes: Sequence[int], k_max: int) -> list[DifferenceRow]:
    """Compute the difference rows for every reported order k."""
    if k_max < 1:
        raise ValueError("k_max must be at least 1")
    if len(primes) < k_max:
        raise ValueError(f"need at least {k_max} primes, got {len(primes)}")
    rows = []
    for k in output_ks(k_max):
        diff = forward_difference(primes[:k])
        rows.append(DifferenceRow(k, diff, signed_log(diff)))
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print finite differences of the primes and their signed logarithms."
    )
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--k-max", type=int, default=DEFAULT_K_MAX)
    args = parser.parse_args(argv)
    limit, k_max = args.limit, args.k_max

    if k_max < 1 or limit < 2:
        print("Invalid configuration, exiting...\n")
        return 1

    print(f"generating primes up to {limit}...", end="", flush=True)
    flags = _odd_sieve(limit)
    nprimes = 1 + flags.count(1)
    print(f" {nprimes} primes found\n")

    if nprimes < k_max:
        print(f"need at least {k_max} primes, found {nprimes}", file=sys.stderr)
        return 1

    primes = list(islice(_primes_from_odd_sieve(limit, flags), k_max))
    rows = compute(primes, k_max)

    print(f"{'k':>16}{'Δ':>16}{'∂':>16}")
    for row in rows:
        print(f"{row.k:16d}{row.diff:16d}{row.log_value:16d}")

    logs = [row.log_value for row in rows]
    print(f"[{min(0, *logs)}, {max(0, *logs)}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())