"""Integer arithmetic: Euclid, powers, binomial coefficients, digit arithmetic, leap years."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` such that ``a*x + b*y == d == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def _check_exponent(b: int) -> None:
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")


def power(a: int, b: int) -> int:
    """Compute ``a**b`` by repeated multiplication (linear in ``b``)."""
    _check_exponent(b)
    result = 1
    for _ in range(b):
        result *= a
    return result


def fast_power(a: int, b: int) -> int:
    """Compute ``a**b`` by recursive squaring."""
    _check_exponent(b)
    if b == 0:
        return 1
    half = fast_power(a, b // 2)
    return half * half * a if b % 2 else half * half


def fast_power_iterative(a: int, b: int) -> int:
    """Compute ``a**b`` by iterative binary exponentiation."""
    _check_exponent(b)
    result = 1
    while b:
        if b % 2:
            result *= a
        a *= a
        b //= 2
    return result


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def _check_binomial(n: int, k: int) -> None:
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"binomial coefficient needs 0 <= k <= n, got n={n}, k={k}")


def binomial(n: int, r: int) -> int:
    """Binomial coefficient from factorials."""
    _check_binomial(n, r)
    return factorial(n) // (factorial(n - r) * factorial(r))


def binomial_recursive(n: int, k: int) -> int:
    """Binomial coefficient from Pascal's recurrence ``C(n,k) = C(n-1,k) + C(n-1,k-1)``."""
    _check_binomial(n, k)

    @lru_cache(maxsize=None)
    def c(n: int, k: int) -> int:
        if n == k or k == 0:
            return 1
        return c(n - 1, k) + c(n - 1, k - 1)

    return c(n, k)


def binomial_dp(n: int, k: int) -> int:
    """Binomial coefficient by filling Pascal's triangle row by row."""
    _check_binomial(n, k)
    row = [1]
    for i in range(1, n + 1):
        width = min(i, k) + 1
        row = [
            1 if j == 0 or j == i else row[j - 1] + row[j]
            for j in range(width)
        ]
    return row[k]


def to_digits(n: int) -> list[int]:
    """Decimal digits of ``n``, least significant first."""
    if n < 0:
        raise ValueError(f"only non-negative numbers have a digit list, got {n}")
    if n == 0:
        return [0]
    digits = []
    while n:
        n, d = divmod(n, 10)
        digits.append(d)
    return digits


def multiply_digits(digits: Iterable[int], factor: int) -> list[int]:
    """Multiply a little-endian decimal digit list by ``factor``, returning a new digit list."""
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    result = []
    carry = 0
    for d in digits:
        if not 0 <= d <= 9:
            raise ValueError(f"not a decimal digit: {d}")
        carry, digit = divmod(d * factor + carry, 10)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(digit)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result or [0]


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    return year % 4 == 0 and year % 100 != 0