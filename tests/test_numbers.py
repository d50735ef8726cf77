import math
from fractions import Fraction

import pytest

from algonotes.numbers import (
    INT_MAX,
    INT_MIN,
    MOD,
    count_good_numbers,
    count_primes,
    divide,
    is_power_of_two,
    min_bit_flips,
    my_pow,
)


@pytest.mark.parametrize(
    "dividend, divisor",
    [(10, 3), (7, -3), (-7, 3), (-7, -3), (0, 5), (1, 1), (5, 5), (2**31 - 1, 2), (-(2**31), 7)],
)
def test_divide_truncates_toward_zero(dividend, divisor):
    assert divide(dividend, divisor) == int(Fraction(dividend, divisor))


def test_divide_clamps_overflow():
    assert divide(INT_MIN, -1) == INT_MAX
    assert divide(INT_MIN, 1) == INT_MIN


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(3, 0)


@pytest.mark.parametrize(
    "x, n", [(2.0, 10), (2.1, 3), (2.0, -2), (0.5, 7), (-3.0, 5), (1.0001, 1000), (7.5, 0)]
)
def test_my_pow_matches_builtin(x, n):
    assert math.isclose(my_pow(x, n), x**n, rel_tol=1e-12)


def test_my_pow_of_zero_with_negative_exponent_raises():
    with pytest.raises(ZeroDivisionError):
        my_pow(0.0, -1)


@pytest.mark.parametrize("n", [-5, 0, 1, 2])
def test_count_primes_below_three_is_trivial(n):
    assert count_primes(n) == (1 if n > 2 else 0)


@pytest.mark.parametrize("n, expected", [(10, 4), (100, 25), (1000, 168)])
def test_count_primes_known_values(n, expected):
    assert count_primes(n) == expected


def test_count_primes_is_non_decreasing_and_rises_by_at_most_one():
    counts = [count_primes(n) for n in range(200)]
    steps = [b - a for a, b in zip(counts, counts[1:])]
    assert set(steps) <= {0, 1}


@pytest.mark.parametrize("k", range(40))
def test_is_power_of_two_true_for_powers(k):
    assert is_power_of_two(2**k)


@pytest.mark.parametrize("k", range(1, 40))
def test_is_power_of_two_false_for_neighbours(k):
    assert not is_power_of_two(2**k + 1)


@pytest.mark.parametrize("n", [0, -1, -8, INT_MIN])
def test_is_power_of_two_false_for_non_positive(n):
    assert not is_power_of_two(n)


def test_count_good_numbers_empty_string():
    assert count_good_numbers(0) == 1


@pytest.mark.parametrize("m", [0, 1, 5, 20, 10**6])
def test_count_good_numbers_alternates_five_and_four_choices(m):
    even = count_good_numbers(2 * m)
    odd = count_good_numbers(2 * m + 1)
    assert odd == even * 5 % MOD
    assert count_good_numbers(2 * m + 2) == odd * 4 % MOD


def test_count_good_numbers_stays_below_modulus():
    assert 0 <= count_good_numbers(10**15) < MOD


def test_count_good_numbers_rejects_negative():
    with pytest.raises(ValueError):
        count_good_numbers(-1)


@pytest.mark.parametrize("x", [0, 1, 10, 12345, 2**40])
def test_min_bit_flips_to_self_is_zero(x):
    assert min_bit_flips(x, x) == 0


@pytest.mark.parametrize("k", range(0, 33))
def test_min_bit_flips_from_zero_to_all_ones(k):
    assert min_bit_flips(0, 2**k - 1) == k


@pytest.mark.parametrize("a, b", [(10, 7), (3, 4), (0, 255), (1023, 1)])
def test_min_bit_flips_is_symmetric(a, b):
    assert min_bit_flips(a, b) == min_bit_flips(b, a)


def test_min_bit_flips_rejects_negative():
    with pytest.raises(ValueError):
        min_bit_flips(-1, 3)