"""ASCII string helpers: number formatting, classification, splitting, search."""

import re
import string
from itertools import islice, zip_longest

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS
_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_PRINTABLE = frozenset(chr(code) for code in range(ord(" "), ord("~") + 1))
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD = re.compile(r"[0-9A-Za-z]+")


def format_base(nb, digits):
    """Write ``nb`` in the base whose digit characters are ``digits``.

    Zero is always written as "0"; negative numbers get a leading '-'.
    """
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if nb == 0:
        return "0"
    magnitude = abs(nb)
    out = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        out.append(digits[remainder])
    sign = "-" if nb < 0 else ""
    return sign + "".join(reversed(out))


def is_alphanumeric(text):
    """Return True if ``text`` is non-empty and only ASCII letters and digits."""
    return bool(text) and set(text) <= _ALNUM


def is_lower(text):
    """Return True if ``text`` is non-empty and holds no ASCII upper-case letter."""
    return bool(text) and not _UPPER.intersection(text)


def is_upper(text):
    """Return True if ``text`` is non-empty and holds no ASCII lower-case letter."""
    return bool(text) and not _LOWER.intersection(text)


def is_numeric(text):
    """Return True if ``text`` is non-empty and only ASCII digits."""
    return bool(text) and set(text) <= _DIGITS


def is_printable(text):
    """Return True if every character of ``text`` is printable ASCII."""
    return set(text) <= _PRINTABLE


def split_words(text):
    """Return the runs of ASCII letters and digits in ``text``."""
    return _WORD.findall(text)


def capitalize(text):
    """Lower-case ``text``, then upper-case the first letter of every word.

    A letter starts a word when the character before it is neither a
    letter nor a digit.
    """
    out = []
    previous = "\0"
    for char in text.translate(_TO_LOWER):
        if previous not in _DIGITS and previous not in _LETTERS and char in _LETTERS:
            out.append(char.upper())
        else:
            out.append(char)
        previous = char
    return "".join(out)


def find_substring(haystack, needle):
    """Return ``haystack`` from the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)
    if index < 0:
        return None
    return haystack[index:]


def _differences(s1, s2):
    return zip_longest(s1, s2, fillvalue="\0")


def compare(s1, s2):
    """Return the code difference at the first position where the strings differ.

    A string that ends counts as a NUL character there; equal strings give 0.
    """
    for a, b in _differences(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_n(s1, s2, n):
    """Like compare, looking at no more than the first ``n`` characters."""
    for a, b in islice(_differences(s1, s2), max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0