"""Map generation and the search for the largest empty square."""

from dataclasses import dataclass
from itertools import cycle, islice

_OBSTACLE = "o"
_EMPTY = "."
_MARK = "x"


@dataclass(frozen=True)
class Square:
    """A square given by its bottom-right corner and its side length."""

    pos_x: int = 0
    pos_y: int = 0
    size: int = 0


def generate_map(size, pattern):
    """Build a ``size`` x ``size`` map by repeating ``pattern`` across rows.

    The pattern runs on from one row to the next; each row ends with a
    newline.
    """
    if size <= 0:
        return ""
    if not pattern:
        raise ValueError("pattern must not be empty")
    cells = cycle(pattern)
    return "".join(
        "".join(islice(cells, size)) + "\n" for _ in range(size)
    )


def weight_map(map_text, nb_cols, nb_rows):
    """Return, row by row, the side of the largest empty square ending at each cell.

    Cells are read from '.' and 'o' characters in order, other characters
    skipped. Missing cells count as obstacles.
    """
    total = nb_cols * nb_rows
    flat = [1 if char == _EMPTY else 0
            for char in map_text if char in (_EMPTY, _OBSTACLE)][:total]
    flat.extend([0] * (total - len(flat)))
    rows = [flat[start:start + nb_cols] for start in range(0, total, nb_cols)] if nb_cols > 0 else []
    for y in range(1, len(rows)):
        above, row = rows[y - 1], rows[y]
        for x in range(1, nb_cols):
            if row[x]:
                row[x] = min(above[x - 1], row[x - 1], above[x]) + 1
    return rows


def find_max_square(map_text, nb_cols, nb_rows):
    """Return the largest empty square; ties go to the first in reading order."""
    best = Square()
    for y, row in enumerate(weight_map(map_text, nb_cols, nb_rows)):
        for x, value in enumerate(row):
            if value > best.size:
                best = Square(pos_x=x, pos_y=y, size=value)
    return best


def reveal_square(square, map_text, nb_cols):
    """Return ``map_text`` with the cells of ``square`` replaced by 'x'."""
    if square.size == 0:
        return map_text
    cells = list(map_text)
    width = nb_cols + 1
    low_y = max(square.pos_y - square.size + 1, 0)
    low_x = max(square.pos_x - square.size + 1, 0)
    for y in range(low_y, square.pos_y + 1):
        for x in range(low_x, square.pos_x + 1):
            cells[y * width + x] = _MARK
    return "".join(cells)


def render_map(map_text, nb_rows, nb_cols):
    """Return the part of ``map_text`` that covers the map's rows and newlines."""
    return map_text[:nb_rows * nb_cols + nb_rows]