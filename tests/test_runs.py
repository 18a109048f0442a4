import re

import pytest

from numtoys.runs import GlibcRandom, find_longest_run, main, runs_bitmap


def test_glibc_sequence_for_seed_one():
    rng = GlibcRandom(1)
    assert [rng.rand() for _ in range(3)] == [1804289383, 846930886, 1681692777]


def test_seed_zero_behaves_like_one():
    a, b = GlibcRandom(0), GlibcRandom(1)
    assert [a.rand() for _ in range(50)] == [b.rand() for _ in range(50)]


@pytest.mark.parametrize("seed", [2, 63, 12345, 2**31 + 7, 2**32 - 1])
def test_values_are_31_bit(seed):
    rng = GlibcRandom(seed)
    values = [rng.rand() for _ in range(200)]
    assert all(0 <= v < 2**31 for v in values)


def test_same_seed_same_sequence():
    a, b = GlibcRandom(42), GlibcRandom(42)
    assert [a.rand() for _ in range(20)] == [b.rand() for _ in range(20)]


@pytest.mark.parametrize("seed", range(10))
def test_longest_run_is_a_residue(seed):
    assert find_longest_run(seed) in (0, 1)
    assert 0 <= find_longest_run(seed, 5, 100) < 5


def test_single_draw_run_is_first_value():
    assert find_longest_run(7, 3, 1) == GlibcRandom(7).rand() % 3


def test_modulus_one_is_zero():
    assert find_longest_run(3, 1, 255) == 0


def test_find_longest_run_errors():
    with pytest.raises(ValueError):
        find_longest_run(0, 0)
    with pytest.raises(ValueError):
        find_longest_run(0, 2, 0)


def test_bitmap_bits_match_runs():
    bits = runs_bitmap(0, 64)
    assert bits < 1 << 64
    for seed in range(64):
        assert (bits >> seed) & 1 == find_longest_run(seed)


def test_bitmap_partial_range():
    assert runs_bitmap(5, 5) == 0
    assert runs_bitmap(10, 20) == runs_bitmap(0, 64) & (((1 << 10) - 1) << 10)


@pytest.mark.parametrize("start,end", [(-1, 4), (5, 4), (0, 65)])
def test_bitmap_bad_range(start, end):
    with pytest.raises(ValueError):
        runs_bitmap(start, end)


def test_main_prints_hex(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"[0-9a-f]{16}\n", out)
    assert int(out, 16) == runs_bitmap(0, 64)