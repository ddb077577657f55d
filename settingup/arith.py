"""Integer arithmetic helpers bounded to the 32-bit signed range."""

from itertools import count
from math import factorial as _factorial
from math import isqrt

from .numparse import INT_MAX, INT_MIN

_MAX_FACTORIAL = 12


def _wrap32(value):
    return (value - INT_MIN) % 2**32 + INT_MIN


def factorial(nb):
    """Return ``nb!``, or 0 when ``nb`` is negative or above 12."""
    if nb < 0 or nb > _MAX_FACTORIAL:
        return 0
    return _factorial(nb)


def power(nb, p):
    """Return ``nb`` raised to ``p``.

    A negative exponent gives 0, as does a product caught overflowing the
    32-bit signed range by the bound checks made before each step.
    """
    if p < 0:
        return 0
    result = 1
    for _ in range(p):
        if nb > 0 and result > INT_MAX // nb:
            return 0
        if nb < 0 and -result > INT_MIN // nb:
            return 0
        result = _wrap32(result * nb)
    return result


def integer_square_root(nb):
    """Return the exact integer square root of ``nb``, or 0 if it has none."""
    if nb == 1:
        return 1
    if nb < 1:
        return 0
    root = isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb):
    """Return True if ``nb`` is a prime number."""
    if nb < 2:
        return False
    return all(nb % divisor for divisor in range(2, isqrt(nb) + 1))


def find_prime_sup(nb):
    """Return the smallest prime greater than or equal to ``nb``.

    Gives 0 when the search reaches the largest 32-bit signed value without
    the number just above ``nb`` being prime.
    """
    if is_prime(nb):
        return nb
    for candidate in count(max(nb + 1, 2)):
        if candidate == INT_MAX and not is_prime(nb + 1):
            return 0
        if is_prime(candidate):
            return candidate
    return 0


def sort_ints(values):
    """Return the given integers as a new list in ascending order."""
    return sorted(values)