import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
import pygame.gfxdraw

from wordsearch.matcher import line_path
from wordsearch.session import PuzzleSession
from wordsearch.themes import get_theme

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class WordSearchEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: ↑↓←→ to move cursor. Space to set word start/end. Shift to submit/cancel."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Find the themed words hidden in the letter grid. Words run in any of eight directions."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = False

    # --- Constants ---
    SCREEN_WIDTH = 640
    SCREEN_HEIGHT = 400
    MAX_GRID_PIXELS = 360
    GRID_ORIGIN = (20, 20)
    UI_X = 400

    FPS = 30
    MAX_STEPS = 30 * 180

    # --- Rewards ---
    REWARD_STEP = -0.01
    REWARD_WORD = 10
    REWARD_MISS = -1.0
    REWARD_COMPLETE = 50

    # --- Colors ---
    COLOR_BG = (15, 23, 42)
    COLOR_GRID_BG = (30, 41, 59)
    COLOR_GRID_LINE = (51, 65, 85)
    COLOR_LETTER = (241, 245, 249)
    COLOR_FOUND_LETTER = (255, 255, 255)
    COLOR_CURSOR = (255, 200, 0)
    COLOR_SELECTION = (99, 102, 241)
    COLOR_UI_TEXT = (220, 220, 220)
    COLOR_UI_MUTED = (120, 130, 150)
    COLOR_SUCCESS_FLASH = (16, 185, 129)
    COLOR_FAIL_FLASH = (220, 80, 80)

    def __init__(self, theme="animals", grid_size=12, render_mode="rgb_array"):
        super().__init__()

        self.render_mode = render_mode
        self.theme = get_theme(theme)
        self.grid_size = grid_size
        self.cell_size = self.MAX_GRID_PIXELS // grid_size

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()

        self.font_letter = pygame.font.Font(None, int(self.cell_size * 0.8))
        self.font_ui = pygame.font.Font(None, 24)
        self.font_ui_large = pygame.font.Font(None, 36)

        self.session = None

        self.steps = 0
        self.score = 0
        self.game_over = False

        self.cursor_pos = [0, 0]
        self.selection_start = None
        self.selection_end = None

        self.last_space_held = False
        self.last_shift_held = False

        self.flash_alpha = 0
        self.flash_color = (0, 0, 0)

        self.reset()

        self.validate_implementation()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        if options and "theme" in options:
            self.theme = get_theme(options["theme"])

        self.steps = 0
        self.score = 0
        self.game_over = False

        # cursor_pos and selection endpoints are (x, y) == (col, row)
        self.cursor_pos = [self.grid_size // 2, self.grid_size // 2]
        self.selection_start = None
        self.selection_end = None

        self.last_space_held = False
        self.last_shift_held = False

        self.flash_alpha = 0
        self.flash_color = (0, 0, 0)

        if self.session is None or self.session.words != list(self.theme.words):
            self.session = PuzzleSession(self.theme.words, self.grid_size, self.np_random)
        else:
            self.session.regenerate(self.np_random)

        # MUST return exactly this tuple
        return self._get_observation(), self._get_info()

    def _selected_cells(self):
        path = line_path(
            (self.selection_start[1], self.selection_start[0]),
            (self.selection_end[1], self.selection_end[0]),
        )
        return path or []

    def _check_and_submit_word(self):
        cells = self._selected_cells()
        word = self.session.check_selection(cells)

        self.selection_start = None
        self.selection_end = None

        if word is None:
            # SFX: Word Invalid
            self.flash_color = self.COLOR_FAIL_FLASH
            self.flash_alpha = 200
            return self.REWARD_MISS

        # SFX: Word Found!
        self.score += 10
        self.flash_color = self.COLOR_SUCCESS_FLASH
        self.flash_alpha = 200
        reward = self.REWARD_WORD
        if self.session.is_complete():
            self.score += 50
            reward += self.REWARD_COMPLETE
        return reward

    def step(self, action):
        # Unpack factorized action
        movement = action[0]
        space_held = action[1] == 1
        shift_held = action[2] == 1

        reward = self.REWARD_STEP

        self.steps += 1
        if self.flash_alpha > 0:
            self.flash_alpha = max(0, self.flash_alpha - 15)

        dx, dy = 0, 0
        if movement == 1: dy = -1
        elif movement == 2: dy = 1
        elif movement == 3: dx = -1
        elif movement == 4: dx = 1

        if dx != 0 or dy != 0:
            self.cursor_pos[0] = (self.cursor_pos[0] + dx) % self.grid_size
            self.cursor_pos[1] = (self.cursor_pos[1] + dy) % self.grid_size

        space_press = space_held and not self.last_space_held
        shift_press = shift_held and not self.last_shift_held

        if space_press:
            if self.selection_start is None:
                self.selection_start = tuple(self.cursor_pos)
                self.selection_end = None
            else:
                self.selection_end = tuple(self.cursor_pos)

        if shift_press:
            if self.selection_start is not None and self.selection_end is not None:
                reward += self._check_and_submit_word()
            elif self.selection_start is not None:
                # SFX: Cancel
                self.selection_start = None
                self.selection_end = None

        self.last_space_held = space_held
        self.last_shift_held = shift_held

        terminated = self._check_termination()
        self.game_over = terminated

        # MUST return exactly this 5-tuple
        return (
            self._get_observation(),
            reward,
            terminated,
            False,
            self._get_info()
        )

    def _check_termination(self):
        if self.steps >= self.MAX_STEPS:
            return True
        return self.session.is_complete()

    def _cell_center(self, row, col):
        ox, oy = self.GRID_ORIGIN
        return (
            ox + col * self.cell_size + self.cell_size // 2,
            oy + row * self.cell_size + self.cell_size // 2,
        )

    def _render_game(self, surface):
        ox, oy = self.GRID_ORIGIN
        extent = self.grid_size * self.cell_size
        pygame.draw.rect(surface, self.COLOR_GRID_BG, pygame.Rect(ox, oy, extent, extent))

        # Draw grid lines
        for i in range(self.grid_size + 1):
            pygame.draw.line(surface, self.COLOR_GRID_LINE, (ox + i * self.cell_size, oy), (ox + i * self.cell_size, oy + extent))
            pygame.draw.line(surface, self.COLOR_GRID_LINE, (ox, oy + i * self.cell_size), (ox + extent, oy + i * self.cell_size))

        # Draw found words in their own color
        for placed in self.session.placed_words:
            if not self.session.is_word_found(placed.text):
                continue
            color = pygame.Color(placed.color)
            first, last = placed.cells[0], placed.cells[-1]
            pygame.draw.line(surface, color, self._cell_center(*first), self._cell_center(*last), self.cell_size // 2)
            for r, c in placed.cells:
                cx, cy = self._cell_center(r, c)
                pygame.gfxdraw.filled_circle(surface, cx, cy, self.cell_size // 3, color)

        # Draw letters
        found_cells = self.session.found_cells()
        for r in range(self.grid_size):
            for c in range(self.grid_size):
                letter = self.session.grid[r][c]
                color = self.COLOR_FOUND_LETTER if (r, c) in found_cells else self.COLOR_LETTER
                text_surf = self.font_letter.render(letter, True, color)
                text_rect = text_surf.get_rect(center=self._cell_center(r, c))
                surface.blit(text_surf, text_rect)

        # Draw selection path
        if self.selection_start:
            end_pos = self.selection_end if self.selection_end else self.cursor_pos
            start_px = self._cell_center(self.selection_start[1], self.selection_start[0])
            end_px = self._cell_center(end_pos[1], end_pos[0])
            pygame.draw.aaline(surface, self.COLOR_SELECTION, start_px, end_px)
            pygame.gfxdraw.aacircle(surface, start_px[0], start_px[1], self.cell_size // 2 - 2, self.COLOR_SELECTION)

        # Draw cursor
        cx, cy = self.cursor_pos
        cursor_rect = pygame.Rect(ox + cx * self.cell_size, oy + cy * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(surface, self.COLOR_CURSOR, cursor_rect, 2, border_radius=4)

    def _render_ui(self, surface):
        x = self.UI_X + 20

        title_surf = self.font_ui_large.render(self.theme.title.upper(), True, self.COLOR_UI_TEXT)
        surface.blit(title_surf, (x, 20))

        progress = f"{len(self.session.found_words)}/{len(self.session.placed_words)} FOUND"
        surface.blit(self.font_ui.render(progress, True, self.COLOR_UI_MUTED), (x, 60))
        surface.blit(self.font_ui.render(f"SCORE: {self.score}", True, self.COLOR_UI_TEXT), (x, 85))

        y_offset = 125
        for placed in self.session.placed_words:
            found = self.session.is_word_found(placed.text)
            color = pygame.Color(placed.color) if found else self.COLOR_UI_TEXT
            text_surf = self.font_ui.render(placed.text, True, color)
            surface.blit(text_surf, (x, y_offset))
            if found:
                pygame.draw.line(surface, color, (x, y_offset + 8), (x + text_surf.get_width(), y_offset + 8), 2)
            y_offset += 25
            if y_offset > 380: break

    def _render_effects(self, surface):
        if self.flash_alpha > 0:
            extent = self.grid_size * self.cell_size
            flash_surf = pygame.Surface((extent, extent), pygame.SRCALPHA)
            flash_surf.fill((*self.flash_color, self.flash_alpha // 3))
            surface.blit(flash_surf, self.GRID_ORIGIN)

    def _get_observation(self):
        self.screen.fill(self.COLOR_BG)

        self._render_game(self.screen)
        self._render_ui(self.screen)
        self._render_effects(self.screen)

        # Convert to numpy array (EXACT format required)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def render(self):
        return self._get_observation()

    def _get_info(self):
        return {
            "score": self.score,
            "steps": self.steps,
            "words_found": len(self.session.found_words),
            "words_total": len(self.session.placed_words),
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert not trunc
        assert isinstance(info, dict)


if __name__ == '__main__':
    # This block allows you to play the game directly
    env = WordSearchEnv(render_mode="rgb_array")

    try:
        window = pygame.display.set_mode((WordSearchEnv.SCREEN_WIDTH, WordSearchEnv.SCREEN_HEIGHT))
        pygame.display.set_caption("Word Search")
    except pygame.error:
        window = None

    obs, info = env.reset()

    running = True
    while running:
        movement, space, shift = 0, 0, 0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        keys = pygame.key.get_pressed()
        if keys[pygame.K_UP]: movement = 1
        elif keys[pygame.K_DOWN]: movement = 2
        elif keys[pygame.K_LEFT]: movement = 3
        elif keys[pygame.K_RIGHT]: movement = 4

        if keys[pygame.K_SPACE]: space = 1
        if keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT]: shift = 1

        obs, reward, terminated, truncated, info = env.step([movement, space, shift])

        if window:
            surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
            window.blit(surf, (0, 0))
            pygame.display.flip()

        if terminated:
            print(f"Game Over! Final Score: {info['score']}")
            obs, info = env.reset()
            pygame.time.wait(2000)

        env.clock.tick(WordSearchEnv.FPS)

    env.close()
