# settingup

This package finds the largest square made only of empty cells in a map of
obstacles. It prints the map with that square filled in with `x`.

A map is made of `.` (empty) and `o` (obstacle) characters. Each square is
found by its bottom-right corner. When several squares share the largest
size, the one whose corner comes first while scanning the map row by row
from the top left wins.

## Installation

```
pip install .
```

## Command line

To solve a map stored in a file:

```
setting_up map.txt
```

The first number in the file gives the number of rows, and it must be
strictly positive. The header line holds that number. Every following line
must end with a newline, must have the same length as the first map line,
and may hold only `.` and `o`. A file with fewer lines than announced is
rejected. Only the announced number of rows is printed.

```
4
....o
..o..
.....
o....
```

To generate a square map from a repeating pattern and solve it:

```
setting_up 6 "..o.."
```

The first argument is the side length, which must be a strictly positive
number. The second argument is a non-empty pattern of `.` and `o`. The
pattern is repeated to fill the map, and it runs on from one row to the
next.

On success the solved map goes to standard output and the exit status is 0.
A wrong number of arguments, or any error, prints a message to standard
error and gives exit status 84.

## Library

```python
from settingup.grid import generate_map, find_max_square
from settingup.cli import solve

text = generate_map(5, "..o..")
square = find_max_square(text, 5, 5)   # Square(pos_x, pos_y, size)
print(solve(text, 5, 5))
```

- `settingup.grid` provides the following:
  - `Square`
  - `generate_map(size, pattern)`
  - `weight_map(map_text, nb_cols, nb_rows)`
  - `find_max_square(...)`
  - `reveal_square(square, map_text, nb_cols)`
  - `render_map(map_text, nb_rows, nb_cols)`
- `settingup.loader` has `map_from_file(path)`, which reads and validates a map file and returns a `LoadedMap` with `map_text`, `nb_cols` and `nb_rows`. The module also has the following:
  - `read_map_file`
  - `parse_map`
  - `get_nb_cols`
  - `get_nb_rows`
  - `strip_header`
  - `validate_map`
- `settingup.cli` has `solve`, `load_and_find`, `generate_and_find` and `main(argv=None)`.
- `settingup.errors` defines `SettingUpError` and its subclasses, each with `exit_code = 84`:
  - `InvalidSquareSize`
  - `InvalidPatternSize`
  - `InvalidPattern`
  - `InvalidLineSize`
  - `IncorrectLines`
  - `InvalidCharacter`
  - `FileLoadError`
- `settingup.numparse.parse_int(text)` reads the first run of digits in a text as a 32-bit signed number. Each `-` before that run flips the sign.
- `settingup.arith` and `settingup.strtools` hold small helpers:
  - integer helpers: factorial, bounded power, exact square root, primes and sorting
  - ASCII string helpers: base formatting, character-class checks, word splitting, capitalisation, substring search and comparison

## Running the tests

```
pip install .[test]
pytest
```