import pytest

from settingup.grid import (
    Square,
    find_max_square,
    generate_map,
    render_map,
    reveal_square,
    weight_map,
)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8])
@pytest.mark.parametrize("pattern", [".", "o", "..o..", "o.", ".oo.."])
def test_generate_map_shape(size, pattern):
    text = generate_map(size, pattern)
    lines = text.split("\n")
    assert len(text) == size * (size + 1)
    assert lines[-1] == ""
    assert all(len(line) == size for line in lines[:-1])
    assert len(lines) - 1 == size


@pytest.mark.parametrize("size", [1, 3, 4, 7])
@pytest.mark.parametrize("pattern", ["..o..", "o.", "...o"])
def test_generate_map_continues_pattern_across_rows(size, pattern):
    body = generate_map(size, pattern).replace("\n", "")
    repeated = pattern * (len(body) // len(pattern) + 1)
    assert repeated.startswith(body)


def test_generate_map_worked_example():
    assert generate_map(3, "..o") == "..o\n..o\n..o\n"


def test_generate_map_non_positive_size_is_empty():
    assert generate_map(0, ".") == ""
    assert generate_map(-3, ".") == ""


def test_generate_map_rejects_empty_pattern():
    with pytest.raises(ValueError):
        generate_map(3, "")


@pytest.mark.parametrize("size", [1, 2, 4, 6])
def test_weight_map_all_empty(size):
    rows = weight_map(generate_map(size, "."), size, size)
    assert len(rows) == size
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            assert value == min(x, y) + 1


def test_weight_map_obstacles_are_zero():
    text = generate_map(5, "..o..")
    rows = weight_map(text, 5, 5)
    for line, row in zip(text.splitlines(), rows):
        for char, value in zip(line, row):
            assert (value == 0) == (char == "o")


def test_weight_map_pads_missing_cells():
    rows = weight_map("..\n", 2, 2)
    assert rows[1] == [0, 0]


@pytest.mark.parametrize("size", [1, 3, 9])
def test_find_max_square_full_map(size):
    assert find_max_square(generate_map(size, "."), size, size) == Square(
        size - 1, size - 1, size
    )


@pytest.mark.parametrize("size", [1, 4])
def test_find_max_square_no_space(size):
    assert find_max_square(generate_map(size, "o"), size, size) == Square(0, 0, 0)


def test_find_max_square_tie_goes_to_first():
    assert find_max_square(".o\n..\n", 2, 2) == Square(0, 0, 1)


def test_reveal_square_worked_example():
    text = ".o\n..\n"
    assert reveal_square(find_max_square(text, 2, 2), text, 2) == "xo\n..\n"


@pytest.mark.parametrize("size", [3, 5, 8, 11])
@pytest.mark.parametrize("pattern", ["..o..", "....o.", "o......", "."])
def test_reveal_square_invariants(size, pattern):
    text = generate_map(size, pattern)
    square = find_max_square(text, size, size)
    revealed = reveal_square(square, text, size)
    assert len(revealed) == len(text)
    assert revealed.count("x") == square.size * square.size
    for before, after in zip(text, revealed):
        if after == "x":
            assert before == "."
        else:
            assert before == after
    lines = revealed.splitlines()
    for y in range(square.pos_y - square.size + 1, square.pos_y + 1):
        segment = lines[y][square.pos_x - square.size + 1:square.pos_x + 1]
        assert segment == "x" * square.size


def test_reveal_square_size_zero_leaves_map():
    text = generate_map(3, "o")
    assert reveal_square(Square(), text, 3) == text


def test_render_map_cuts_to_rows():
    assert render_map("ab\ncd\nEXTRA", 2, 2) == "ab\ncd\n"


@pytest.mark.parametrize("size", [1, 4, 6])
def test_render_map_keeps_whole_generated_map(size):
    text = generate_map(size, "..o")
    assert render_map(text, size, size) == text