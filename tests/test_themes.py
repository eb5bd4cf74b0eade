import string

import pytest

from wordsearch.themes import THEMES, get_theme


def test_theme_ids_unique():
    ids = [t.id for t in THEMES]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("theme", THEMES, ids=lambda t: t.id)
def test_theme_words_fit_default_grid(theme):
    assert theme.words
    for word in theme.words:
        assert 2 <= len(word) <= 10
        assert set(word) <= set(string.ascii_uppercase)


def test_get_theme():
    assert get_theme("space").title == "Space"
    with pytest.raises(ValueError):
        get_theme("dinosaurs")


def test_theme_words_are_immutable():
    assert all(isinstance(t.words, tuple) for t in THEMES)
