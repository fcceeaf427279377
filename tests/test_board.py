import random

import pytest

from slidepuzzle.board import (
    is_game_over,
    is_solvable,
    move_tile,
    new_shuffled_grid,
    shuffle_grid,
)


def solved(n):
    return list(range(1, n * n)) + [0]


@pytest.mark.parametrize("n", [3, 4, 5])
def test_solved_board_is_game_over(n):
    assert is_game_over(solved(n), n) is True


def test_game_over_false_when_out_of_order():
    board = solved(4)
    board[0], board[1] = board[1], board[0]
    assert is_game_over(board, 4) is False


def test_game_over_false_for_identity_start():
    assert is_game_over(list(range(9)), 3) is False


def test_shuffle_is_permutation():
    board = list(range(16))
    shuffle_grid(board, random.Random(7))
    assert sorted(board) == list(range(16))


def test_shuffle_deterministic_with_seed():
    a = list(range(25))
    b = list(range(25))
    shuffle_grid(a, random.Random(42))
    shuffle_grid(b, random.Random(42))
    assert a == b


def test_move_tile_along_row():
    board = solved(3)
    assert move_tile(board, 2, 0, 3) is True
    assert board == [1, 2, 3, 4, 5, 6, 0, 7, 8]


def test_move_tile_along_column_puts_empty_at_tile():
    board = solved(4)
    assert move_tile(board, 0, 3, 4) is True
    assert board[3] == 0
    assert sorted(board) == list(range(16))
    column = [board[r * 4 + 3] for r in range(4)]
    assert column == [0, 4, 8, 12]


@pytest.mark.parametrize("tile", [(0, 0), (1, 1), (2, 2)])
def test_move_tile_not_in_line_or_empty_does_nothing(tile):
    board = solved(3)
    before = list(board)
    assert move_tile(board, *tile, 3) is False
    assert board == before


@pytest.mark.parametrize("tile", [(3, 2), (2, 3), (-1, 2)])
def test_move_tile_outside_board_does_nothing(tile):
    board = solved(3)
    before = list(board)
    assert move_tile(board, *tile, 3) is False
    assert board == before


def test_move_round_trip_restores_board():
    board = solved(4)
    assert move_tile(board, 3, 0, 4)
    assert move_tile(board, 3, 3, 4)
    assert board == solved(4)


def test_move_without_empty_cell_raises():
    with pytest.raises(ValueError):
        move_tile([1, 2, 3, 4], 0, 0, 2)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_solved_board_is_solvable(n):
    assert is_solvable(solved(n), n) is True


@pytest.mark.parametrize("n", [3, 4, 5])
def test_swapping_two_tiles_is_unsolvable(n):
    board = solved(n)
    board[-2], board[-3] = board[-3], board[-2]
    assert is_solvable(board, n) is False


def test_moves_preserve_solvability():
    rng = random.Random(3)
    for n in (3, 4, 5):
        board = solved(n)
        for _ in range(200):
            move_tile(board, rng.randrange(n), rng.randrange(n), n)
            assert is_solvable(board, n)
        assert sorted(board) == list(range(n * n))


def test_even_board_without_empty_raises():
    with pytest.raises(ValueError):
        is_solvable([1, 2, 3, 4], 2)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_new_shuffled_grid_is_solvable_permutation(n):
    board = new_shuffled_grid(n, random.Random(n))
    assert sorted(board) == list(range(n * n))
    assert is_solvable(board, n)


def test_new_shuffled_grid_deterministic():
    first = new_shuffled_grid(4, random.Random(9))
    second = new_shuffled_grid(4, random.Random(9))
    assert len(first) == 16
    assert sorted(first) == list(range(16))
    assert is_solvable(first, 4) is True
    assert first == second