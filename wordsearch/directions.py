from collections import namedtuple


class Direction(namedtuple("Direction", ["name", "row_delta", "col_delta"])):
    """A straight line orientation on the grid, one (row, col) delta per letter."""

    __slots__ = ()

    @staticmethod
    def start_range(axis_delta, length, size):
        # Inclusive bounds for the first cell so the whole walk stays on the grid.
        if axis_delta == 0:
            return 0, size - 1
        if axis_delta > 0:
            return 0, size - length
        return length - 1, size - 1

    def row_range(self, length, size):
        return self.start_range(self.row_delta, length, size)

    def col_range(self, length, size):
        return self.start_range(self.col_delta, length, size)

    def cells(self, start_row, start_col, length):
        for i in range(length):
            yield start_row + i * self.row_delta, start_col + i * self.col_delta


DIRECTIONS = (
    Direction("horizontal", 0, 1),
    Direction("horizontal-reverse", 0, -1),
    Direction("vertical", 1, 0),
    Direction("vertical-reverse", -1, 0),
    Direction("diagonal-forward", 1, 1),
    Direction("diagonal-forward-reverse", -1, -1),
    Direction("diagonal-backward", 1, -1),
    Direction("diagonal-backward-reverse", -1, 1),
)

_BY_NAME = {d.name: d for d in DIRECTIONS}


def get_direction(name):
    return _BY_NAME[name]
