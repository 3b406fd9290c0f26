import math

import pytest

from algokit.modular import crt, mod_inverse, mod_inverse_fermat, mod_pow


@pytest.mark.parametrize("a,p,m", [(2, 10, 1000), (3, 200, 13), (7, 0, 5), (123, 45, 67), (-4, 3, 9)])
def test_mod_pow_matches_builtin(a, p, m):
    assert mod_pow(a, p, m) == pow(a, p, m)


def test_mod_pow_zero_exponent_is_one():
    assert mod_pow(5, 0, 1) == 1


@pytest.mark.parametrize("a,p,m", [(2, -1, 5), (2, 3, 0)])
def test_mod_pow_bad_args(a, p, m):
    with pytest.raises(ValueError):
        mod_pow(a, p, m)


@pytest.mark.parametrize("a,p", [(3, 11), (10, 17), (7, 26), (1, 2), (100, 101)])
def test_mod_inverse(a, p):
    inv = mod_inverse(a, p)
    assert 0 <= inv < p
    assert a * inv % p == 1


def test_mod_inverse_matches_builtin():
    for a in range(1, 30):
        if math.gcd(a, 30) == 1:
            assert mod_inverse(a, 30) == pow(a, -1, 30)


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(6, 9)


@pytest.mark.parametrize("p", [5, 13, 101, 1009])
def test_fermat_agrees_with_euclid(p):
    for a in range(1, min(p, 50)):
        assert mod_inverse_fermat(a, p) == mod_inverse(a, p)


def test_fermat_rejects_multiple_of_modulus():
    with pytest.raises(ValueError):
        mod_inverse_fermat(14, 7)


def test_crt_classic_example():
    assert crt([3, 5, 7], [2, 3, 2]) == 23


@pytest.mark.parametrize(
    "moduli,remainders",
    [([3, 4, 5], [2, 3, 1]), ([11, 13, 17], [10, 0, 5]), ([7], [3]), ([5, 9, 8, 11], [1, 2, 3, 4])],
)
def test_crt_satisfies_congruences(moduli, remainders):
    x = crt(moduli, remainders)
    assert 0 <= x < math.prod(moduli)
    for m, r in zip(moduli, remainders):
        assert x % m == r % m


def test_crt_length_mismatch():
    with pytest.raises(ValueError):
        crt([3, 5], [1])


def test_crt_non_coprime_moduli():
    with pytest.raises(ValueError):
        crt([4, 6], [1, 3])