"""Modular arithmetic: exponentiation, inverses and the Chinese remainder theorem."""

from __future__ import annotations

from typing import Sequence

from .arithmetic import extended_euclid


def mod_pow(a: int, p: int, m: int) -> int:
    """Compute ``a**p mod m`` by binary exponentiation; ``p == 0`` gives 1."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    if p < 0:
        raise ValueError(f"exponent must be non-negative, got {p}")
    if p == 0:
        return 1
    result = 1
    base = a % m
    while p:
        if p & 1:
            result = result * base % m
        base = base * base % m
        p >>= 1
    return result


def mod_inverse(a: int, p: int) -> int:
    """Inverse of ``a`` modulo ``p`` via the extended Euclidean algorithm."""
    if p <= 0:
        raise ValueError(f"modulus must be positive, got {p}")
    d, x, _ = extended_euclid(a % p, p)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return x % p


def mod_inverse_fermat(a: int, p: int) -> int:
    """Inverse of ``a`` modulo a prime ``p`` by Fermat's little theorem."""
    if p < 2:
        raise ValueError(f"modulus must be a prime, got {p}")
    if a % p == 0:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return mod_pow(a, p - 2, p)


def crt(moduli: Sequence[int], remainders: Sequence[int]) -> int:
    """Smallest non-negative x with ``x % moduli[i] == remainders[i] % moduli[i]``.

    The moduli must be pairwise coprime.
    """
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders must have the same length")
    prod = 1
    for m in moduli:
        prod *= m
    x = 0
    for m, r in zip(moduli, remainders):
        partial = prod // m
        x = (x + r * partial * mod_inverse(partial, m)) % prod
    return x % prod