import numpy as np
import pytest

from wordsearch.env import WordSearchEnv
from wordsearch.policy import policy


@pytest.fixture(scope="module")
def env():
    env = WordSearchEnv(theme="animals")
    yield env
    env.close()


def test_reset_returns_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (400, 640, 3)
    assert obs.dtype == np.uint8
    assert env.observation_space.contains(obs)
    assert info["steps"] == 0
    assert info["words_found"] == 0
    assert info["words_total"] == len(env.session.placed_words)


def test_seeded_reset_is_reproducible(env):
    env.reset(seed=123)
    first = [row[:] for row in env.session.grid]
    env.reset(seed=123)
    assert env.session.grid == first


def test_theme_option(env):
    env.reset(seed=1, options={"theme": "space"})
    assert env.theme.id == "space"
    assert env.session.get_all_words() == list(env.theme.words)
    env.reset(seed=1, options={"theme": "animals"})


def test_cursor_wraps(env):
    env.reset(seed=0)
    env.cursor_pos = [0, 0]
    env.step([1, 0, 0])
    assert env.cursor_pos == [0, env.grid_size - 1]
    env.step([3, 0, 0])
    assert env.cursor_pos == [env.grid_size - 1, env.grid_size - 1]


def test_failed_submission_is_penalised(env):
    env.reset(seed=0)
    env.selection_start = (0, 0)
    env.selection_end = (5, 1)
    obs, reward, terminated, truncated, info = env.step([0, 0, 1])
    assert reward == pytest.approx(env.REWARD_STEP + env.REWARD_MISS)
    assert env.selection_start is None
    assert info["words_found"] == 0
    assert not terminated


def test_shift_cancels_half_selection(env):
    env.reset(seed=0)
    env.step([0, 1, 0])
    assert env.selection_start == tuple(env.cursor_pos)
    env.step([0, 0, 0])
    env.step([0, 0, 1])
    assert env.selection_start is None


def test_submitting_a_placed_word(env):
    env.reset(seed=5)
    target = env.session.placed_words[0]
    (r1, c1), (r2, c2) = target.cells[-1], target.cells[0]
    env.selection_start = (c1, r1)
    env.selection_end = (c2, r2)
    _, reward, _, _, info = env.step([0, 0, 1])
    assert reward == pytest.approx(env.REWARD_STEP + env.REWARD_WORD)
    assert env.session.is_word_found(target.text)
    assert info["score"] == 10


def test_policy_solves_puzzle(env):
    obs, info = env.reset(seed=7)
    terminated = False
    total_reward = 0
    while not terminated:
        obs, reward, terminated, truncated, info = env.step(policy(env))
        total_reward += reward
    assert env.steps < env.MAX_STEPS
    assert info["words_found"] == info["words_total"]
    assert env.session.is_complete()
    assert total_reward > 0
