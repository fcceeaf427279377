"""The puzzle game: screens, click handling and the main loop."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable

import pygame

from slidepuzzle.board import is_game_over, move_tile, new_shuffled_grid
from slidepuzzle.defs import SCREEN_HEIGHT, SCREEN_WIDTH, TILE_SIZE, GameState
from slidepuzzle.graphics import (
    draw_button,
    draw_grid,
    draw_setting,
    draw_text,
    load_image,
    load_sound,
)

BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
FONT_PATH = "fonts/arial.ttf"
TITLE = "15 Puzzle"
TILE_IMAGE_COUNT = 24
FRAME_DELAY_MS = 20

MENU_X, MENU_WIDTH = 300, 200
COLUMN_WIDTH, COLUMN_HEIGHT = 120, 50
COLUMN_X = (SCREEN_WIDTH - COLUMN_WIDTH) // 2
COLUMN_Y = (SCREEN_HEIGHT - 170) // 2
COLUMN_STEP = 60
PLAY_AGAIN_Y = 300
SETTINGS_ICON = (SCREEN_WIDTH - 40, 10, 30, 30)
RESET_AREA = (10, 150, 100, 50)
LEVEL_SIZES = (3, 4, 5)


def _ticks() -> int:
    return int(time.monotonic() * 1000)


def _inside(x: int, y: int, left: int, top: int, width: int, height: int) -> bool:
    return left <= x <= left + width and top <= y <= top + height


def _column_button(x: int, y: int) -> int | None:
    """Index of the stacked centre-column button under (x, y), if any."""
    for slot in range(3):
        if _inside(x, y, COLUMN_X, COLUMN_Y + slot * COLUMN_STEP, COLUMN_WIDTH, COLUMN_HEIGHT):
            return slot
    return None


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(FONT_PATH, size)
    except (pygame.error, OSError):
        return pygame.font.Font(None, size)


def _play(sound) -> None:
    if sound is not None:
        sound.play()


class Game:
    """State of one puzzle session together with its window resources."""

    def __init__(
        self,
        grid_size: int = 4,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.grid_size = grid_size
        self.rng = rng or random.Random()
        self.clock = clock or _ticks
        self.state = GameState.START
        self.arr = list(range(grid_size * grid_size))
        self.moves = 0
        self.start_time = 0
        self.settings_opened_at = 0
        self.settings_from_start = False
        self.quit = False

        self.screen: pygame.Surface | None = None
        self.font = None
        self.title_font = None
        self.win_font = None
        self.setting_texture: pygame.Surface | None = None
        self.textures: list[pygame.Surface | None] = []
        self.move_sound = None
        self.kick_sound = None
        self.start_sound = None
        self.win_sound = None
        self.menu_sound = None

    def init(self) -> None:
        """Open the window and load fonts, images and sounds."""
        pygame.mixer.pre_init(44100, -16, 2, 2048)
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Puzzle Game")
        self.font = _load_font(24)
        self.title_font = _load_font(65)
        self.win_font = _load_font(30)
        self.setting_texture = load_image("img/setting.png")
        self.move_sound = load_sound("sound/move.wav")
        self.kick_sound = load_sound("sound/kick.wav")
        self.start_sound = load_sound("sound/start.wav")
        self.win_sound = load_sound("sound/win.wav")
        self.menu_sound = load_sound("sound/menu.wav")
        self.textures = [load_image(f"img/{n}.png") for n in range(1, TILE_IMAGE_COUNT + 1)]
        _play(self.menu_sound)

    def run(self) -> None:
        """Process events and redraw until the player quits."""
        while not self.quit:
            for event in pygame.event.get():
                self.handle_event(event)
            self.update()
            self.render()
            pygame.time.delay(FRAME_DELAY_MS)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit = True
        if event.type == pygame.MOUSEBUTTONDOWN:
            handlers = {
                GameState.START: self.handle_start_click,
                GameState.PLAYING: self.handle_playing_click,
                GameState.SETTINGS: self.handle_settings_click,
                GameState.OVER: self.handle_game_over_click,
                GameState.LEVEL: self.handle_level_click,
            }
            handler = handlers.get(self.state)
            if handler is not None:
                handler(*event.pos)

    def _new_round(self) -> None:
        self.arr = new_shuffled_grid(self.grid_size, self.rng)
        self.start_time = self.clock()
        self.moves = 0

    def handle_start_click(self, x: int, y: int) -> None:
        in_column = MENU_X <= x <= MENU_X + MENU_WIDTH
        if in_column and 200 <= y <= 250:
            if self.menu_sound is not None:
                self.menu_sound.stop()
                self.menu_sound = None
            _play(self.start_sound)
            self.state = GameState.PLAYING
            self.settings_from_start = False
            self._new_round()
        elif in_column and 200 <= y <= 320:
            _play(self.kick_sound)
            self.state = GameState.SETTINGS
            self.settings_from_start = True
        elif in_column and 200 <= y <= 390:
            self.quit = True

    def handle_playing_click(self, x: int, y: int) -> None:
        board = self.grid_size * TILE_SIZE
        start_x = (SCREEN_WIDTH - board) // 2
        start_y = (SCREEN_HEIGHT - board) // 2
        if _inside(x, y, *SETTINGS_ICON):
            _play(self.kick_sound)
            self.state = GameState.SETTINGS
            self.settings_opened_at = self.clock()
        elif _inside(x, y, start_x, start_y, board, board):
            tile_y = (x - start_x) // TILE_SIZE
            tile_x = (y - start_y) // TILE_SIZE
            if move_tile(self.arr, tile_x, tile_y, self.grid_size):
                self.moves += 1
                _play(self.move_sound)
        elif _inside(x, y, *RESET_AREA):
            _play(self.kick_sound)
            self._new_round()
        if is_game_over(self.arr, self.grid_size):
            _play(self.win_sound)
            self.state = GameState.OVER

    def handle_settings_click(self, x: int, y: int) -> None:
        slot = _column_button(x, y)
        if slot is None:
            return
        _play(self.kick_sound)
        if slot == 0:
            if self.settings_from_start:
                self.state = GameState.START
            else:
                self.state = GameState.PLAYING
                self.start_time += self.clock() - self.settings_opened_at
        elif slot == 1:
            self.state = GameState.LEVEL
        else:
            self.quit = True

    def handle_game_over_click(self, x: int, y: int) -> None:
        if _inside(x, y, COLUMN_X, PLAY_AGAIN_Y, COLUMN_WIDTH, COLUMN_HEIGHT):
            _play(self.start_sound)
            self.state = GameState.PLAYING
            self._new_round()

    def handle_level_click(self, x: int, y: int) -> None:
        slot = _column_button(x, y)
        if slot is not None:
            _play(self.kick_sound)
            self.grid_size = LEVEL_SIZES[slot]
        self._new_round()
        self.state = GameState.PLAYING

    def update(self) -> None:
        if self.state is GameState.PLAYING and is_game_over(self.arr, self.grid_size):
            _play(self.win_sound)
            self.state = GameState.OVER

    def _draw_column(self, labels: tuple[str, str, str]) -> None:
        for slot, label in enumerate(labels):
            draw_button(
                self.screen,
                self.font,
                COLUMN_X,
                COLUMN_Y + slot * COLUMN_STEP,
                COLUMN_WIDTH,
                COLUMN_HEIGHT,
                label,
            )

    def render(self) -> None:
        """Draw the current screen."""
        screen = self.screen
        if screen is None:
            raise RuntimeError("init() must be called before render()")
        screen.fill(BACKGROUND)

        if self.state is GameState.START:
            title_width, _ = self.title_font.size(TITLE)
            draw_text(screen, self.title_font, TITLE, int((SCREEN_WIDTH - title_width) / 2), 80, WHITE)
            for offset, label in zip((200, 270, 340), ("Start", "Settings", "Exit")):
                draw_button(screen, self.font, MENU_X, offset, MENU_WIDTH, 50, label)
        elif self.state is GameState.PLAYING:
            draw_grid(screen, self.textures, self.arr, self.grid_size)
            draw_setting(screen, self.setting_texture, *SETTINGS_ICON)
            elapsed = max(0, self.clock() - self.start_time) // 1000
            draw_text(screen, self.font, f"Time: {elapsed}s", 10, 10, WHITE)
            draw_text(screen, self.font, f"Moves: {self.moves}", 10, 40, WHITE)
            draw_button(screen, self.font, 30, 160, 80, 40, "Reset")
        elif self.state is GameState.OVER:
            draw_text(screen, self.win_font, "You Win!", 340, 200, WHITE)
            draw_button(
                screen, self.font, COLUMN_X, PLAY_AGAIN_Y, COLUMN_WIDTH, COLUMN_HEIGHT, "Play Again"
            )
        elif self.state is GameState.SETTINGS:
            self._draw_column(("Back", "Level", "Exit"))
        elif self.state is GameState.LEVEL:
            self._draw_column(("Easy", "Normal", "Hard"))

        if pygame.display.get_init() and screen is pygame.display.get_surface():
            pygame.display.flip()

    def clean_up(self) -> None:
        """Release every loaded resource and shut pygame down."""
        self.textures = []
        self.setting_texture = None
        self.font = self.title_font = self.win_font = None
        self.move_sound = self.kick_sound = self.start_sound = None
        self.win_sound = self.menu_sound = None
        self.screen = None
        if pygame.mixer.get_init() is not None:
            pygame.mixer.quit()
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(prog="slidepuzzle", description="Sliding tile puzzle.").parse_args(argv)
    game = Game()
    game.init()
    try:
        game.run()
    finally:
        game.clean_up()
    return 0