"""Reading map files: header parsing, validation and extraction of the grid."""

from dataclasses import dataclass
from pathlib import Path

from .errors import FileLoadError, IncorrectLines, InvalidCharacter, InvalidLineSize
from .numparse import parse_int

_BAD_HEADER = "setting_up : failed reading file, incorrect number on line 1"
_CELLS = frozenset(".o")


@dataclass(frozen=True)
class LoadedMap:
    """A validated map without its header line, with its dimensions."""

    map_text: str
    nb_cols: int
    nb_rows: int


def _until_nul(text):
    return text.split("\0", 1)[0]


def read_map_file(path):
    """Return the whole content of the map file at ``path``.

    Raises FileLoadError if the file cannot be opened or is empty.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise FileLoadError("setting_up: Failed opening file.") from exc
    if not data:
        raise FileLoadError("setting_up: Failed reading file, cannot be empty")
    return data.decode("latin-1")


def get_nb_cols(content):
    """Return the length of the first map line, the one after the header.

    Raises FileLoadError if there is no header line, or if the first map
    line is not ended by a newline.
    """
    _, sep, rest = _until_nul(content).partition("\n")
    if not sep:
        raise FileLoadError(_BAD_HEADER)
    line, newline, _ = rest.partition("\n")
    if line and not newline:
        raise FileLoadError(_BAD_HEADER)
    return len(line)


def get_nb_rows(content):
    """Return the row count announced by the file, which must be positive.

    The count is the first number found in the content.
    """
    nb_rows = parse_int(content)
    if nb_rows <= 0:
        raise FileLoadError(_BAD_HEADER)
    return nb_rows


def strip_header(content):
    """Return ``content`` without its first line."""
    return _until_nul(content).partition("\n")[2]


def validate_map(map_text, nb_rows, nb_cols):
    """Check the map's characters, line lengths and line count.

    Returns ``map_text`` unchanged when it is valid.
    """
    line_count = 0
    line_len = 0
    for char in map_text:
        if char == "\n":
            if line_len != nb_cols:
                raise InvalidLineSize()
            line_len = 0
            line_count += 1
        elif char in _CELLS:
            line_len += 1
        else:
            raise InvalidCharacter(char, line_count)
    if line_count < nb_rows:
        raise IncorrectLines(nb_rows, line_count)
    return map_text


def parse_map(content):
    """Turn the content of a map file into a validated LoadedMap."""
    nb_cols = get_nb_cols(content)
    nb_rows = get_nb_rows(content)
    map_text = validate_map(strip_header(content), nb_rows, nb_cols)
    return LoadedMap(map_text=map_text, nb_cols=nb_cols, nb_rows=nb_rows)


def map_from_file(path):
    """Read, parse and validate the map file at ``path``."""
    return parse_map(read_map_file(path))