import pytest

from numtoys.primediffs import (
    DifferenceRow,
    compute,
    forward_difference,
    generate_primes,
    main,
    output_ks,
    signed_log,
    small_sieve,
)


def test_small_sieve_thirty():
    assert small_sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_no_primes_below_two(n):
    assert small_sieve(n) == []
    assert generate_primes(n) == []


def test_generate_two():
    assert generate_primes(2) == [2]


@pytest.mark.parametrize("n", range(2, 300))
def test_sieves_agree(n):
    assert generate_primes(n) == small_sieve(n)


def test_generate_primes_are_prime_and_bounded():
    primes = generate_primes(1000)
    assert all(p <= 1000 for p in primes)
    assert all(all(p % q for q in primes if q * q <= p) for p in primes)
    assert primes == sorted(set(primes))


def test_forward_difference_single_value():
    assert forward_difference([42]) == 42


def test_forward_difference_two_values():
    assert forward_difference([7, 3]) == 7 - 3
    assert forward_difference([3, 7]) == 3 - 7


@pytest.mark.parametrize("length", [2, 5, 17, 100])
def test_forward_difference_constant_is_zero(length):
    assert forward_difference([9] * length) == 0


@pytest.mark.parametrize("length", [3, 6, 40])
def test_forward_difference_linear_is_zero(length):
    assert forward_difference([5 + 3 * i for i in range(length)]) == 0


def test_forward_difference_wraps_to_signed_32_bits():
    assert forward_difference([2**31, 0]) == -(2**31)
    assert forward_difference([2**32 + 5]) == 5


def test_forward_difference_empty():
    with pytest.raises(ValueError):
        forward_difference([])


def test_signed_log_symmetry():
    assert signed_log(0) == 0
    for value in (1, 2, 100, 10**6, 2**31 - 1):
        assert signed_log(-value) == -signed_log(value)
        assert signed_log(value) >= 0


def test_output_ks():
    assert output_ks(10) == [1, 2, 4, 8, 10]
    assert output_ks(8) == [1, 2, 4, 8]
    assert output_ks(1) == [1]


def test_compute_rows():
    primes = generate_primes(200)
    rows = compute(primes, 16)
    assert [row.k for row in rows] == output_ks(16)
    assert rows[0] == DifferenceRow(1, primes[0], signed_log(primes[0]))
    assert rows[1].diff == primes[0] - primes[1]
    for row in rows:
        assert row.diff == forward_difference(primes[: row.k])
        assert row.log_value == signed_log(row.diff)


def test_compute_errors():
    with pytest.raises(ValueError):
        compute([2, 3, 5], 0)
    with pytest.raises(ValueError):
        compute([2, 3, 5], 4)


def test_main_small_run(capsys):
    assert main(["--limit", "100", "--k-max", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "generating primes up to 100... 25 primes found"
    rows = compute(generate_primes(100), 4)
    body = lines[3:-1]
    assert body == [f"{r.k:16d}{r.diff:16d}{r.log_value:16d}" for r in rows]
    logs = [r.log_value for r in rows]
    assert lines[-1] == f"[{min(0, *logs)}, {max(0, *logs)}]"


def test_main_invalid_configuration(capsys):
    assert main(["--limit", "1"]) == 1
    assert "Invalid configuration" in capsys.readouterr().out


def test_main_too_few_primes(capsys):
    assert main(["--limit", "10", "--k-max", "8"]) == 1
    assert "need at least 8 primes" in capsys.readouterr().err