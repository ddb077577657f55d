"""Command line entry point: solve a map file or a generated map."""

import sys

from .errors import InvalidPattern, InvalidPatternSize, InvalidSquareSize, SettingUpError, is_pattern_valid
from .grid import find_max_square, generate_map, render_map, reveal_square
from .loader import map_from_file
from .numparse import parse_int

_USAGE_ERROR = "setting_up: Invalid number of arguments."
_EXIT_FAILURE = 84


def solve(map_text, nb_cols, nb_rows):
    """Return the map with its largest empty square drawn with 'x'."""
    square = find_max_square(map_text, nb_cols, nb_rows)
    revealed = reveal_square(square, map_text, nb_cols)
    return render_map(revealed, nb_rows, nb_cols)


def load_and_find(path):
    """Load the map file at ``path`` and return it solved."""
    loaded = map_from_file(path)
    return solve(loaded.map_text, loaded.nb_cols, loaded.nb_rows)


def generate_and_find(square_size, pattern):
    """Generate a square map from ``pattern`` and return it solved.

    ``square_size`` is read leniently, as text, into a number.
    """
    size = parse_int(str(square_size))
    if size <= 0:
        raise InvalidSquareSize()
    if not pattern:
        raise InvalidPatternSize()
    if not is_pattern_valid(pattern):
        raise InvalidPattern()
    return solve(generate_map(size, pattern), size, size)


def main(argv=None):
    """Run the program and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print(_USAGE_ERROR, file=sys.stderr)
        return _EXIT_FAILURE
    try:
        if len(args) == 1:
            result = load_and_find(args[0])
        else:
            result = generate_and_find(args[0], args[1])
    except SettingUpError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())