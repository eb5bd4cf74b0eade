import logging

import numpy as np

from wordsearch import generator, matcher

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 12


class PuzzleSession:
    """One active puzzle: the grid, its placed words and the words found so far."""

    def __init__(self, words, size=DEFAULT_GRID_SIZE, np_random=None):
        self.words = generator.unique_words(words)
        self.size = size
        self.np_random = np_random if np_random is not None else np.random.default_rng()
        self.grid = None
        self.placed_words = []
        self.found_words = set()
        self._found_order = []

        self.regenerate(np_random)

    def regenerate(self, np_random=None):
        if np_random is not None:
            self.np_random = np_random
        puzzle = generator.generate(self.words, self.size, self.np_random)
        self.grid = puzzle.grid
        self.placed_words = puzzle.placed_words
        self.found_words = set()
        self._found_order = []
        logger.info(
            "New %dx%d puzzle with %d of %d words placed",
            self.size, self.size, len(self.placed_words), len(self.words),
        )

    def check_selection(self, cells):
        word = matcher.check_selection(cells, self.grid, self.placed_words, self.found_words)
        if word is not None:
            self._found_order.append(word)
        return word

    def mark_found(self, word):
        word = word.upper()
        if self.placed_word(word) is None or word in self.found_words:
            return
        matcher.mark_found(self.found_words, word)
        self._found_order.append(word)

    def is_word_found(self, word):
        return word.upper() in self.found_words

    def get_found_words(self):
        return list(self._found_order)

    def get_all_words(self):
        return list(self.words)

    def placed_word(self, text):
        text = text.upper()
        for placed in self.placed_words:
            if placed.text == text:
                return placed
        return None

    def remaining_words(self):
        return [p.text for p in self.placed_words if p.text not in self.found_words]

    def skipped_words(self):
        placed = {p.text for p in self.placed_words}
        return [w for w in self.words if w not in placed]

    def found_cells(self):
        cells = set()
        for placed in self.placed_words:
            if placed.text in self.found_words:
                cells.update(placed.cells)
        return cells

    def is_complete(self):
        return all(p.text in self.found_words for p in self.placed_words)
