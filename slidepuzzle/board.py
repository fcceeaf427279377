"""Sliding-puzzle board logic.

A board is a flat list of ``grid_size * grid_size`` integers in row-major
order. Tiles are numbered from 1 and the empty cell is 0.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence

EMPTY = 0


def shuffle_grid(arr: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle the board in place."""
    (rng or random.Random()).shuffle(arr)


def is_game_over(arr: Sequence[int], grid_size: int) -> bool:
    """Return True when tiles 1..n*n-1 occupy the first n*n-1 cells in order."""
    cells = grid_size * grid_size
    return all(value == expected for expected, value in zip(range(1, cells), arr[: cells - 1]))


def _empty_index(arr: Sequence[int]) -> int:
    try:
        return arr.index(EMPTY)
    except ValueError:
        raise ValueError("board has no empty cell") from None


def move_tile(arr: MutableSequence[int], tile_x: int, tile_y: int, grid_size: int) -> bool:
    """Slide the tile at row ``tile_x``, column ``tile_y`` towards the empty cell.

    Every tile between the chosen one and the empty cell shifts one step, so a
    whole line can move at once. Returns True when anything moved. A cell that
    is not in line with the empty cell, is the empty cell itself, or lies
    outside the board leaves the board unchanged.
    """
    if not (0 <= tile_x < grid_size and 0 <= tile_y < grid_size):
        return False

    empty_x, empty_y = divmod(_empty_index(arr), grid_size)

    if tile_x == empty_x and tile_y != empty_y:
        step = 1 if tile_y > empty_y else -1
        path = [tile_x * grid_size + col for col in range(empty_y, tile_y + step, step)]
    elif tile_y == empty_y and tile_x != empty_x:
        step = 1 if tile_x > empty_x else -1
        path = [row * grid_size + tile_y for row in range(empty_x, tile_x + step, step)]
    else:
        return False

    values = [arr[i] for i in path]
    for index, value in zip(path, values[1:] + values[:1]):
        arr[index] = value
    return True


def is_solvable(arr: Sequence[int], grid_size: int) -> bool:
    """Return True when the arrangement can be brought to the solved order."""
    tiles = [value for value in arr[: grid_size * grid_size] if value != EMPTY]
    inversions = sum(
        1
        for i, first in enumerate(tiles)
        for second in tiles[i + 1 :]
        if first > second
    )
    if grid_size % 2 == 1:
        return inversions % 2 == 0
    zero_row = _empty_index(arr) // grid_size
    return (inversions + zero_row) % 2 == 1


def new_shuffled_grid(grid_size: int, rng: random.Random | None = None) -> list[int]:
    """Return a freshly shuffled board that is guaranteed to be solvable."""
    rng = rng or random.Random()
    arr = list(range(grid_size * grid_size))
    shuffle_grid(arr, rng)
    while not is_solvable(arr, grid_size):
        shuffle_grid(arr, rng)
    return arr