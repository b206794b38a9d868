"""Modular arithmetic helpers."""

from __future__ import annotations


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent`` reduced by ``modulus`` with binary exponentiation.

    An exponent of zero gives 1 without reducing it.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        base = base * base % modulus
    return result


def _series(ratio: int, terms: int, modulus: int) -> int:
    if terms == 0:
        return 0
    if terms == 1:
        return 1
    half = _series(ratio * ratio % modulus, terms // 2, modulus)
    result = (1 + ratio) * half % modulus
    if terms % 2 == 1:
        result = (result + power_mod(ratio, terms - 1, modulus)) % modulus
    return result


def geometric_series_mod(ratio: int, terms: int, modulus: int) -> int:
    """Sum of ``ratio ** i`` for ``i`` in ``range(terms)``, modulo ``modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if terms < 0:
        raise ValueError("terms must not be negative")
    if modulus == 1:
        return 0
    return _series(ratio % modulus, terms, modulus)