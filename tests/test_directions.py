import pytest

from wordsearch.directions import DIRECTIONS, get_direction


def test_eight_distinct_directions():
    assert len(DIRECTIONS) == 8
    deltas = {(d.row_delta, d.col_delta) for d in DIRECTIONS}
    assert len(deltas) == 8
    assert (0, 0) not in deltas


def test_named_deltas():
    assert get_direction("horizontal")[1:] == (0, 1)
    assert get_direction("vertical-reverse")[1:] == (-1, 0)
    assert get_direction("diagonal-forward")[1:] == (1, 1)
    assert get_direction("diagonal-backward")[1:] == (1, -1)
    assert get_direction("diagonal-backward-reverse")[1:] == (-1, 1)


def test_unknown_direction():
    with pytest.raises(KeyError):
        get_direction("sideways")


def test_start_ranges():
    horizontal = get_direction("horizontal")
    assert horizontal.row_range(3, 5) == (0, 4)
    assert horizontal.col_range(3, 5) == (0, 2)

    backward = get_direction("diagonal-backward")
    assert backward.row_range(3, 5) == (0, 2)
    assert backward.col_range(3, 5) == (2, 4)


@pytest.mark.parametrize("direction", DIRECTIONS, ids=lambda d: d.name)
def test_every_start_in_range_keeps_walk_on_grid(direction):
    size, length = 6, 4
    row_lo, row_hi = direction.row_range(length, size)
    col_lo, col_hi = direction.col_range(length, size)
    for r in range(row_lo, row_hi + 1):
        for c in range(col_lo, col_hi + 1):
            cells = list(direction.cells(r, c, length))
            assert len(cells) == length
            assert all(0 <= row < size and 0 <= col < size for row, col in cells)


def test_word_as_long_as_grid_has_a_slot():
    for direction in DIRECTIONS:
        row_lo, row_hi = direction.row_range(5, 5)
        col_lo, col_hi = direction.col_range(5, 5)
        assert row_lo <= row_hi
        assert col_lo <= col_hi
