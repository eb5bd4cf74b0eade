import logging
import numbers
import string
from collections import namedtuple

import numpy as np

from wordsearch.directions import DIRECTIONS

logger = logging.getLogger(__name__)

# --- Constants ---
PLACEMENT_ATTEMPTS = 100
ALPHABET = string.ascii_uppercase

COLOR_PALETTE = (
    "#3B82F6",  # Blue
    "#8B5CF6",  # Purple
    "#EC4899",  # Pink
    "#F59E0B",  # Amber
    "#10B981",  # Green
    "#EF4444",  # Red
)

PlacedWord = namedtuple("PlacedWord", ["text", "cells", "color"])
Puzzle = namedtuple("Puzzle", ["grid", "placed_words"])


def normalize_word(word):
    return word.strip().upper()


def unique_words(words):
    """Normalized words with repeats dropped, first occurrence kept."""
    return list(dict.fromkeys(normalize_word(w) for w in words))


def is_valid_word(word):
    return bool(word) and all(ch in ALPHABET for ch in word)


def empty_grid(size):
    return [['' for _ in range(size)] for _ in range(size)]


def try_place(grid, word, start_row, start_col, direction):
    """Write ``word`` along ``direction`` if every cell is free or already holds
    the same letter. Returns the ordered cells, or None with the grid untouched."""
    size = len(grid)
    cells = []
    for letter, (row, col) in zip(word, direction.cells(start_row, start_col, len(word))):
        if not (0 <= row < size and 0 <= col < size):
            return None
        existing = grid[row][col]
        if existing != '' and existing != letter:
            return None
        cells.append((row, col))

    for letter, (row, col) in zip(word, cells):
        grid[row][col] = letter
    return tuple(cells)


def _attempt_placement(grid, word, np_random):
    size = len(grid)
    for _ in range(PLACEMENT_ATTEMPTS):
        direction = DIRECTIONS[np_random.integers(len(DIRECTIONS))]

        row_lo, row_hi = direction.row_range(len(word), size)
        col_lo, col_hi = direction.col_range(len(word), size)
        start_row = int(np_random.integers(row_lo, row_hi + 1))
        start_col = int(np_random.integers(col_lo, col_hi + 1))

        cells = try_place(grid, word, start_row, start_col, direction)
        if cells is not None:
            return cells
    return None


def fill_empty_cells(grid, np_random):
    for r in range(len(grid)):
        for c in range(len(grid[r])):
            if grid[r][c] == '':
                grid[r][c] = ALPHABET[int(np_random.integers(len(ALPHABET)))]


def generate(words, size, np_random=None):
    """Build a size x size word search.

    Words are placed longest first; a word that can't be placed within
    PLACEMENT_ATTEMPTS random tries is left out of ``placed_words``. Every
    remaining empty cell gets a random letter.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
        raise ValueError(f"Grid size must be a positive integer, got {size!r}")
    size = int(size)
    if np_random is None:
        np_random = np.random.default_rng()

    grid = empty_grid(size)
    placed_words = []

    to_place = sorted(unique_words(words), key=len, reverse=True)

    for i, word in enumerate(to_place):
        color = COLOR_PALETTE[i % len(COLOR_PALETTE)]

        if not is_valid_word(word):
            logger.warning("Skipping word %r: only the letters A-Z are supported", word)
            continue
        if len(word) > size:
            logger.warning("Skipping word %r: longer than the %dx%d grid", word, size, size)
            continue

        cells = _attempt_placement(grid, word, np_random)
        if cells is None:
            # Word could not be placed, it will be absent from the puzzle.
            logger.debug("Gave up on %r after %d attempts", word, PLACEMENT_ATTEMPTS)
            continue

        placed_words.append(PlacedWord(word, cells, color))

    fill_empty_cells(grid, np_random)
    return Puzzle(grid, placed_words)
