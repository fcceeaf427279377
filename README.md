# slidepuzzle

A sliding tile puzzle game built on pygame. The board holds numbered picture
tiles and one empty square. Click a tile in the same row or column as the gap
and it slides towards the gap, together with every tile in between. Put the
tiles back in order (1, 2, 3, … with the gap last) to win.

Three board sizes can be chosen from the settings menu:

| Level  | Board | Tiles |
|--------|-------|-------|
| Easy   | 3 × 3 | 8     |
| Normal | 4 × 4 | 15    |
| Hard   | 5 × 5 | 24    |

The game starts on the 4 × 4 board. Every shuffle is checked to be solvable
before play starts.

## Installing

```
pip install .
```

## Playing

```
slidepuzzle
```

`slidepuzzle --help` prints a short usage line; the command takes no other
options.

The game looks for its assets relative to the current directory:

- `fonts/arial.ttf` – if it cannot be opened, pygame's default font is used
- `img/1.png` … `img/24.png` (tile pictures) and `img/setting.png` (gear icon)
- `sound/move.wav`, `sound/kick.wav`, `sound/start.wav`, `sound/win.wav`,
  `sound/menu.wav`

A missing image or sound is reported on standard error and simply left out:
the tile or icon is not drawn, the sound is not played.

Screens:

- **Start** – *Start* shuffles a new board and starts the clock, *Settings*
  opens the settings menu, *Exit* quits.
- **Playing** – elapsed time and move count are shown in the top left.
  *Reset* reshuffles and zeroes both. The gear icon in the top right opens the
  settings menu; the clock is paused while it is open.
- **Settings** – *Back* returns to the screen it was opened from, *Level*
  opens the level menu, *Exit* quits.
- **Level** – *Easy*, *Normal* or *Hard* sets the board size. Any click on this
  screen starts a freshly shuffled game at the chosen (or current) size.
- **You Win!** – *Play Again* starts a fresh shuffle of the same size.

## Using the board logic

The puzzle rules live in `slidepuzzle.board` and need no display. A board is a
flat list of `n * n` integers in row-major order, with `0` for the gap.

```python
import random
from slidepuzzle.board import new_shuffled_grid, move_tile, is_game_over, is_solvable

grid = new_shuffled_grid(4, random.Random(1))
assert is_solvable(grid, 4)
moved = move_tile(grid, 0, 0, 4)   # True if any tiles slid
print(is_game_over(grid, 4))
```

- `shuffle_grid(arr, rng=None)` shuffles a board in place.
- `new_shuffled_grid(grid_size, rng=None)` returns a shuffled, solvable board.
- `move_tile(arr, tile_x, tile_y, grid_size)` slides the tile at row `tile_x`,
  column `tile_y` towards the gap and returns whether anything moved. Cells
  outside the board or not in line with the gap leave it unchanged.
- `is_solvable(arr, grid_size)` and `is_game_over(arr, grid_size)` test a
  board.

`slidepuzzle.game.Game` holds a session's state and click handling; it accepts
a `random.Random` and a millisecond clock function, so its screens can be
driven without a window.

## What it does not do

- No assets are included; the fonts, pictures and sounds listed above must be
  supplied in the working directory.
- There is no rules or help screen, and no high scores or best times are kept.

## Running the tests

```
pip install .[test]
pytest
```