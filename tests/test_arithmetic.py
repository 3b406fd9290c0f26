import calendar
import math

import pytest

from algokit.arithmetic import (
    binomial,
    binomial_dp,
    binomial_recursive,
    extended_euclid,
    factorial,
    fast_power,
    fast_power_iterative,
    gcd,
    is_leap_year,
    multiply_digits,
    power,
    to_digits,
)


def _from_digits(digits):
    return sum(d * 10**i for i, d in enumerate(digits))


@pytest.mark.parametrize("a,b", [(16, 10), (48, 18), (17, 5), (0, 9), (9, 0), (1071, 462)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(16, 10), (240, 46), (17, 5), (7, 0), (35, 64)])
def test_extended_euclid_bezout(a, b):
    d, x, y = extended_euclid(a, b)
    assert d == math.gcd(a, b)
    assert a * x + b * y == d


@pytest.mark.parametrize("func", [power, fast_power, fast_power_iterative])
@pytest.mark.parametrize("a,b", [(2, 30), (3, 0), (5, 1), (-3, 7), (10, 13)])
def test_powers_match_builtin(func, a, b):
    assert func(a, b) == pow(a, b)


@pytest.mark.parametrize("func", [power, fast_power, fast_power_iterative])
def test_powers_reject_negative_exponent(func):
    with pytest.raises(ValueError):
        func(2, -1)


def test_factorial_matches_math():
    for n in range(15):
        assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("func", [binomial, binomial_recursive, binomial_dp])
def test_binomials_match_comb(func):
    for n in range(12):
        for k in range(n + 1):
            assert func(n, k) == math.comb(n, k)


def test_binomial_dp_source_example():
    assert binomial_dp(6, 4) == 15


@pytest.mark.parametrize("func", [binomial, binomial_recursive, binomial_dp])
@pytest.mark.parametrize("n,k", [(3, 4), (-1, 0), (5, -2)])
def test_binomials_reject_bad_args(func, n, k):
    with pytest.raises(ValueError):
        func(n, k)


def test_to_digits_is_little_endian():
    assert to_digits(484) == [4, 8, 4]
    assert _from_digits(to_digits(109546051211)) == 109546051211


def test_to_digits_negative():
    with pytest.raises(ValueError):
        to_digits(-5)


@pytest.mark.parametrize("n,factor", [(484, 2168), (999, 999), (0, 7), (123, 0), (5, 1)])
def test_multiply_digits_round_trip(n, factor):
    assert _from_digits(multiply_digits(to_digits(n), factor)) == n * factor


def test_multiply_digits_rejects_non_digit():
    with pytest.raises(ValueError):
        multiply_digits([12], 3)


def test_leap_year_matches_calendar():
    for year in range(1, 2500):
        assert is_leap_year(year) == calendar.isleap(year)