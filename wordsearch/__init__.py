from wordsearch.directions import DIRECTIONS, Direction, get_direction
from wordsearch.generator import COLOR_PALETTE, PLACEMENT_ATTEMPTS, PlacedWord, Puzzle, generate
from wordsearch.matcher import check_selection, line_path, mark_found
from wordsearch.session import PuzzleSession
from wordsearch.themes import THEMES, Theme, get_theme

__all__ = [
    "COLOR_PALETTE",
    "DIRECTIONS",
    "Direction",
    "PLACEMENT_ATTEMPTS",
    "PlacedWord",
    "Puzzle",
    "PuzzleSession",
    "THEMES",
    "Theme",
    "check_selection",
    "generate",
    "get_direction",
    "get_theme",
    "line_path",
    "mark_found",
]
