import logging
import numbers

logger = logging.getLogger(__name__)


def _as_cell(cell):
    try:
        row, col = cell
    except (TypeError, ValueError):
        return None
    for v in (row, col):
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            return None
    return int(row), int(col)


def _letters_at(grid, cells):
    return "".join(grid[r][c] for r, c in cells)


def mark_found(found_words, word):
    found_words.add(word.upper())


def check_selection(selected_cells, grid, placed_words, found_words):
    """Return the placed word whose footprint is exactly ``selected_cells``.

    The selection may run in either direction. A match is added to
    ``found_words``; anything else returns None and changes nothing.
    """
    if len(selected_cells) < 2:
        return None

    selection = [_as_cell(cell) for cell in selected_cells]
    if None in selection:
        return None
    selected_set = set(selection)
    if len(selected_set) != len(selection):
        return None

    for placed in placed_words:
        if placed.text in found_words:
            continue

        footprint = set(placed.cells)
        if len(footprint) != len(selected_set) or footprint != selected_set:
            continue

        # Footprint cells are all in bounds, so the selection is too.
        canonical = _letters_at(grid, placed.cells)
        candidate = _letters_at(grid, selection)
        if candidate in (canonical, canonical[::-1], placed.text) or candidate[::-1] == placed.text:
            mark_found(found_words, placed.text)
            logger.info("Found %s", placed.text)
            return placed.text

    return None


def line_path(start, end):
    """Cells from ``start`` to ``end`` inclusive along a horizontal, vertical or
    45 degree line, or None if the two cells are not aligned."""
    r1, c1 = start
    r2, c2 = end
    dr, dc = r2 - r1, c2 - c1

    if not (dr == 0 or dc == 0 or abs(dr) == abs(dc)):
        return None

    steps = max(abs(dr), abs(dc))
    if steps == 0:
        return [(r1, c1)]

    step_r = dr // steps
    step_c = dc // steps
    return [(r1 + i * step_r, c1 + i * step_c) for i in range(steps + 1)]
