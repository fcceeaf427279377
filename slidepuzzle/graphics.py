"""Drawing helpers and resource loading for the puzzle window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from slidepuzzle.board import EMPTY
from slidepuzzle.defs import SCREEN_HEIGHT, SCREEN_WIDTH, TILE_SIZE

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BUTTON_COLOR: Color = (0, 0, 0)
BUTTON_HOVER_COLOR: Color = (50, 50, 50)
SHADOW_COLOR: Color = (0, 0, 0)
SHADOW_OFFSET = 4
TILE_PADDING = 1


def _board_origin(grid_size: int) -> tuple[int, int]:
    board = grid_size * TILE_SIZE
    return (SCREEN_WIDTH - board) // 2, (SCREEN_HEIGHT - board) // 2


def draw_grid(
    surface: pygame.Surface,
    textures: Sequence[pygame.Surface | None],
    arr: Sequence[int],
    grid_size: int,
) -> None:
    """Draw the board lines and every tile image, centred on the screen."""
    board = grid_size * TILE_SIZE
    start_x, start_y = _board_origin(grid_size)

    for k in range(grid_size + 1):
        offset = k * TILE_SIZE
        for d in (-1, 0, 1):
            row_y = start_y + offset + d
            pygame.draw.line(surface, WHITE, (start_x, row_y), (start_x + board, row_y))
            col_x = start_x + offset + d
            pygame.draw.line(surface, WHITE, (col_x, start_y), (col_x, start_y + board))

    inner = TILE_SIZE - 2 * TILE_PADDING
    for index, value in enumerate(arr[: grid_size * grid_size]):
        if value == EMPTY:
            continue
        texture = textures[value - 1]
        if texture is None:
            continue
        row, col = divmod(index, grid_size)
        position = (
            start_x + col * TILE_SIZE + TILE_PADDING,
            start_y + row * TILE_SIZE + TILE_PADDING,
        )
        surface.blit(pygame.transform.scale(texture, (inner, inner)), position)


def draw_button(
    surface: pygame.Surface, font, x: int, y: int, width: int, height: int, text: str
) -> None:
    """Draw a bordered button with a drop shadow and centred label."""
    shadow = pygame.Rect(x - SHADOW_OFFSET, y - SHADOW_OFFSET, width, height)
    surface.fill(SHADOW_COLOR, shadow)

    rect = pygame.Rect(x, y, width, height)
    fill = BUTTON_HOVER_COLOR if is_mouse_over(x, y, width, height) else BUTTON_COLOR
    surface.fill(fill, rect)
    pygame.draw.rect(surface, WHITE, rect, 1)

    text_width, text_height = font.size(text)
    draw_text(
        surface,
        font,
        text,
        x + int((width - text_width) / 2),
        y + int((height - text_height) / 2),
        WHITE,
    )


def draw_text(surface: pygame.Surface, font, text: str, x: int, y: int, color: Color) -> pygame.Rect:
    """Render ``text`` without anti-aliasing with its top-left corner at (x, y)."""
    rendered = font.render(text, False, color)
    return surface.blit(rendered, (x, y))


def load_image(path: str) -> pygame.Surface | None:
    """Load an image file, or report the failure and return None."""
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        print(f"Unable to load image {path}! {exc}", file=sys.stderr)
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_sound(path: str) -> pygame.mixer.Sound | None:
    """Load a sound at full volume, or report the failure and return None."""
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(44100, -16, 2, 2048)
        sound = pygame.mixer.Sound(path)
    except (pygame.error, OSError) as exc:
        print(f"Failed to load sound file ({path})! {exc}", file=sys.stderr)
        return None
    sound.set_volume(1.0)
    return sound


def draw_setting(
    surface: pygame.Surface, texture: pygame.Surface | None, x: int, y: int, width: int, height: int
) -> None:
    """Draw the settings icon scaled into the given rectangle."""
    if texture is None:
        return
    surface.blit(pygame.transform.scale(texture, (width, height)), (x, y))


def is_mouse_over(x: int, y: int, w: int, h: int) -> bool:
    """Return True when the pointer lies inside the rectangle, edges included."""
    mx, my = pygame.mouse.get_pos()
    return x <= mx <= x + w and y <= my <= y + h