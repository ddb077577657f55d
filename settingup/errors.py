"""Errors raised while building, loading or checking a map."""

_PREFIX = "setting_up: "
_ALLOWED = frozenset(".o")


class SettingUpError(Exception):
    """Base class of every error the program reports."""

    exit_code = 84


class InvalidSquareSize(SettingUpError):
    """The requested square size is not strictly positive."""

    def __init__(self):
        super().__init__(
            _PREFIX + "invalid square size, must be a strictly positive number"
        )


class InvalidPatternSize(SettingUpError):
    """The generation pattern is empty."""

    def __init__(self):
        super().__init__(
            _PREFIX + "invalid pattern size, must be at least 1 character long"
        )


class InvalidPattern(SettingUpError):
    """The generation pattern holds characters other than '.' and 'o'."""

    def __init__(self):
        super().__init__(
            _PREFIX + "invalid pattern, must be composed only of '.' and "
            "'o' characters (ex: \"..o..\")"
        )


class InvalidLineSize(SettingUpError):
    """A map line does not have the expected length."""

    def __init__(self):
        super().__init__(
            _PREFIX + "invalid line size, all lines must be the same length"
        )


class IncorrectLines(SettingUpError):
    """The map has fewer lines than its header announces."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(
            f"{_PREFIX}Incorrect number of lines, expected {expected} but got "
            f"{got} please set the first line of the file to the correct value."
        )


class InvalidCharacter(SettingUpError):
    """The map holds a character other than '.', 'o' and newline."""

    def __init__(self, character, line):
        self.character = character
        self.line = line
        super().__init__(
            f"{_PREFIX}Invalid character '{character}' on line {line}, a map "
            "can only be composed of '.' and 'o' (and return char)."
        )


class FileLoadError(SettingUpError):
    """The map file could not be opened, read or understood."""


def is_pattern_valid(pattern):
    """Return True if ``pattern`` holds only '.' and 'o' characters."""
    return set(pattern) <= _ALLOWED