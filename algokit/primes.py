"""Prime numbers: primality, sieves, factorisation and Euler's totient."""

from __future__ import annotations

from math import isqrt
from typing import Sequence


def is_prime(n: int) -> bool:
    """Trial-division primality test in O(sqrt n)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % i for i in range(3, isqrt(n) + 1, 2))


def sieve(n: int) -> list[bool]:
    """Sieve of Eratosthenes: a list whose index ``i`` tells whether ``i`` is prime."""
    if n < 0:
        raise ValueError(f"sieve limit must be non-negative, got {n}")
    marks = [True] * (n + 1)
    marks[0] = False
    if n >= 1:
        marks[1] = False
    for i in range(2, isqrt(n) + 1):
        if marks[i]:
            marks[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return marks


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than ``n``."""
    if n < 2:
        return []
    return [i for i, prime in enumerate(sieve(n)) if prime]


def factorize(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError(f"can only factorise positive numbers, got {n}")
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n != 1:
        factors.append(n)
    return factors


def min_prime_table(limit: int) -> list[int]:
    """Smallest prime divisor of every number up to ``limit``; entry 1 is 1, entry 0 is 0."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    table = [0] * (limit + 1)
    table[1] = 1
    for i in range(2, limit + 1):
        if not table[i]:
            table[i] = i
            for j in range(i * i, limit + 1, i):
                if not table[j]:
                    table[j] = i
    return table


def factorize_fast(n: int, min_prime: Sequence[int]) -> list[int]:
    """Factorise ``n`` in O(log n) using a table from :func:`min_prime_table`."""
    if not 1 <= n < len(min_prime):
        raise ValueError(f"{n} is outside the range of the smallest-prime table")
    factors = []
    while n != 1:
        p = min_prime[n]
        factors.append(p)
        n //= p
    return factors


def distinct_prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in ascending order."""
    return list(dict.fromkeys(factorize(n)))


def totient(n: int) -> int:
    """Euler's totient; 0 and 1 both give 1."""
    if n < 0:
        raise ValueError(f"totient is undefined for negative numbers, got {n}")
    if n in (0, 1):
        return 1
    result = n
    for p in distinct_prime_factors(n):
        result = result // p * (p - 1)
    return result


def segmented_sieve(low: int, high: int) -> list[int]:
    """All primes in the closed range ``[low, high]``."""
    low = max(low, 2)
    if low > high:
        return []
    marks = [True] * (high - low + 1)
    for p in primes_up_to(isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        for k in range(start, high + 1, p):
            marks[k - low] = False
    return [low + i for i, prime in enumerate(marks) if prime]