from collections import namedtuple

Theme = namedtuple("Theme", ["id", "title", "words"])

# --- Word Bank ---
THEMES = [
    Theme("animals", "Animals", (
        "ELEPHANT", "GIRAFFE", "TIGER", "ZEBRA", "MONKEY", "PANDA", "KOALA", "RABBIT",
    )),
    Theme("fruits", "Fruits", (
        "BANANA", "CHERRY", "MANGO", "ORANGE", "PAPAYA", "LEMON", "GRAPE", "APPLE",
    )),
    Theme("space", "Space", (
        "GALAXY", "PLANET", "COMET", "ORBIT", "NEBULA", "METEOR", "ROCKET", "SATURN",
    )),
    Theme("ocean", "Ocean", (
        "DOLPHIN", "WHALE", "CORAL", "SHARK", "OCTOPUS", "SEAWEED", "TURTLE", "OYSTER",
    )),
    Theme("sports", "Sports", (
        "SOCCER", "TENNIS", "HOCKEY", "BOXING", "GOLF", "RUGBY", "CRICKET", "SKIING",
    )),
    Theme("coding", "Coding", (
        "PYTHON", "SEARCH", "PUZZLE", "VECTOR", "TENSOR", "POLICY", "REWARD", "AGENT",
    )),
]

_BY_ID = {t.id: t for t in THEMES}


def get_theme(theme_id):
    try:
        return _BY_ID[theme_id]
    except KeyError:
        raise ValueError(f"Unknown theme: {theme_id!r}") from None
