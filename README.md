# numtoys

A handful of small number experiments. Each one can be used as a library
module or run from the command line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `numtoys-adboxes` | Prints a grid of ANSI true-colour boxes. Each box shows the arithmetic derivative of one number, taken modulo a base. |
| `numtoys-bran` | Packs the bytes `01`..`08` into one little-endian 64-bit integer, prints it, then unpacks it again. |
| `numtoys-magoo` | Runs a short demonstration of the in-memory record store. It prints `1` when the updated first record is still active. |
| `numtoys-primediffs` | Sieves primes. For `k` = 1, 2, 4, ... and `k_max`, prints the forward difference of the first `k` primes and its signed logarithm. Then prints the smallest and largest logarithm, each range including 0. |
| `numtoys-runs` | For seeds 0..63, finds which bit value forms the longest run in 255 draws of `rand() % 2`. Prints the results as a 16-digit hex mask. |

Options:

- `numtoys-adboxes --base B --columns C --max-n N`. The defaults are 2, 32 and 2048. The base must be at least 2 and the columns positive.
- `numtoys-primediffs --limit L --k-max K`. The defaults are 2**30 and 2**13. With `K < 1` or `L < 2` the command prints an error and exits with status 1. It does the same when fewer than `K` primes lie below `L`.

By default `numtoys-primediffs` sieves every prime up to 2**30. In pure Python
this takes a long time and a lot of memory. For a quick run, pass a smaller
`--limit`, for example `--limit 1000000`.

## Library use

### Arithmetic derivatives (`numtoys.adboxes`)

```python
from numtoys.adboxes import arithmetic_derivative, is_prime, render, shades

arithmetic_derivative(12)   # 16
is_prime(97)                # True
shades(2)                   # [0, 255]
print(render(base=2, columns=32, max_n=256))
```

### Byte packing (`numtoys.bran`)

```python
from numtoys.bran import pack, unpack, format_bytes

value = pack(bytes([1, 2, 3, 4, 5, 6, 7, 8]))  # first byte is the lowest
format_bytes(unpack(value))  # "01 02 03 04 05 06 07 08 "
```

`pack` needs exactly eight bytes. `unpack` needs a value that fits in 64
unsigned bits. Both raise `ValueError` otherwise.

### Record store (`numtoys.magoo`)

```python
from numtoys.magoo import Database, DatabaseFullError

db = Database()
record_id = db.create("First record")
db.update(record_id, "Updated first")
db.data(record_id)          # "Updated first"
db.delete(record_id)
db.is_active(record_id)     # False
db.read(record_id).length   # 13
```

Identifiers start at 1 and are handed out in order. Deleting a record only
marks it inactive, and its identifier is never reused. The store hands out at
most 255 identifiers. After that, `create` raises `DatabaseFullError`.

`read`, `update`, `delete` and `data` raise `KeyError` for an unknown
identifier. `is_active` returns `False` for an unknown identifier.

Records live only in memory. Nothing is saved to disk.

### Prime finite differences (`numtoys.primediffs`)

```python
from numtoys.primediffs import generate_primes, compute

primes = generate_primes(10_000)
for row in compute(primes, k_max=64):
    print(row.k, row.diff, row.log_value)
```

- `small_sieve(limit)` and `generate_primes(n)` return all primes up to and including the bound.
- `forward_difference(values)` collapses a sequence by repeatedly replacing it with `a[i] - a[i+1]`. The result wraps to a signed 32-bit integer.
- `signed_log(diff)` returns `sign(d) * ln(1 + |d|)`, truncated toward zero.
- `output_ks(k_max)` lists the reported `k` values: the powers of two up to `k_max`, plus `k_max` itself.
- `compute(primes, k_max)` returns one `DifferenceRow` per reported `k`. It raises `ValueError` if `k_max < 1` or if there are fewer than `k_max` primes.

### Random runs (`numtoys.runs`)

```python
from numtoys.runs import GlibcRandom, find_longest_run, runs_bitmap

GlibcRandom(1).rand()
find_longest_run(5, modulus=2, count=255)
hex(runs_bitmap(0, 64))
```

`GlibcRandom` reproduces the sequence that the GNU C library's
`srand()`/`rand()` gives for a seed. `find_longest_run` returns the value that
forms the first longest run. `runs_bitmap` sets bit `s` to that value for each
seed `s` in `[start, end)`. It needs `0 <= start <= end <= 64`.