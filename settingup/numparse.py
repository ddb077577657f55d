"""Lenient integer parsing of free-form text."""

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_DIGITS = 10
_DIGITS = re.compile(r"[0-9]+")


def parse_int(text):
    """Return the first run of digits in ``text`` as an int.

    Every '-' met before that run flips the sign. A run longer than ten
    digits, or a value outside the 32-bit signed range, gives 0, as does
    text with no digit at all. Text after a NUL character is ignored.
    """
    text = text.split("\0", 1)[0]
    match = _DIGITS.search(text)
    if match is None:
        return 0
    digits = match.group()
    value = 0 if len(digits) > _MAX_DIGITS else int(digits)
    if text.count("-", 0, match.start()) % 2 == 1:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        return 0
    return value