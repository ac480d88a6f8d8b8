"""Tests for the Reversi board state."""

import numpy as np
import pytest

from reversi.agents import CornerBiasedAgent
from reversi.board import BoardState, Cell, DARK_SYMBOL, EMPTY_SYMBOL, LIGHT_SYMBOL

D, L, E = Cell.DARK, Cell.LIGHT, Cell.EMPTY


def test_initial_state_min_size():
    bs = BoardState(2)

    assert bs.board_size() == 4
    assert bs.board[1, 1] == D
    assert bs.board[2, 2] == D
    assert bs.board[1, 2] == L
    assert bs.board[2, 1] == L
    assert np.count_nonzero(bs.board) == 4
    assert bs.current_turn() == D
    assert not bs.is_it_white_turn()
    assert not bs.is_over


def test_initial_state_reversed():
    bs = BoardState(2, start_reversed=True)

    assert bs.board[1, 1] == L
    assert bs.board[2, 2] == L
    assert bs.board[1, 2] == D
    assert bs.board[2, 1] == D
    assert bs.current_turn() == D


def test_initial_state_8x8():
    bs = BoardState()

    assert bs.board_size() == 8
    assert bs.board[3, 3] == D
    assert bs.board[4, 4] == D
    assert bs.board[3, 4] == L
    assert bs.board[4, 3] == L
    assert len(bs.legal_moves()) == 4


@pytest.mark.parametrize("start_reversed", [False, True])
def test_render_grid_after_construction(start_reversed):
    bs = BoardState(2, start_reversed=start_reversed)
    grid = bs.render_grid()
    dark_label, light_label = bs.color_labels()

    placed = [(r, c, sym) for r, row in enumerate(grid) for c, sym in enumerate(row) if sym != EMPTY_SYMBOL]
    assert len(placed) == 4

    diagonal, anti_diagonal = (light_label, dark_label) if start_reversed else (dark_label, light_label)
    assert grid[1][1] == grid[2][2] == diagonal
    assert grid[1][2] == grid[2][1] == anti_diagonal


def test_color_labels():
    assert BoardState.color_labels() == (DARK_SYMBOL, LIGHT_SYMBOL)
    assert BoardState.black_piece() == DARK_SYMBOL
    assert BoardState.white_piece() == LIGHT_SYMBOL


@pytest.mark.parametrize("half_size", [0, 1, -3])
def test_invalid_half_size(half_size):
    with pytest.raises(ValueError):
        BoardState(half_size)


@pytest.mark.parametrize("size", [2, 3, 5, 9])
def test_from_size_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        BoardState.from_size(size)


def test_from_size():
    bs = BoardState.from_size(6, start_reversed=True)
    assert bs.board_size() == 6
    assert bs.board[2, 2] == L


def test_from_grid_rejects_non_square():
    with pytest.raises(ValueError):
        BoardState.from_grid(np.zeros((4, 6)))


def test_from_grid_rejects_unknown_values():
    grid = np.zeros((4, 4))
    grid[0, 0] = 7
    with pytest.raises(ValueError):
        BoardState.from_grid(grid)


def test_initial_capture_map():
    bs = BoardState(2)
    capture_map = bs.capture_map()

    expected = np.zeros((4, 4), dtype=int)
    for r, c in [(0, 2), (1, 3), (2, 0), (3, 1)]:
        expected[r, c] = 1
    assert np.array_equal(capture_map, expected)
    assert bs.legal_moves() == [(0, 2), (1, 3), (2, 0), (3, 1)]


def test_capture_map_aliases_agree():
    bs = BoardState()
    assert np.array_equal(bs.capture_map(), bs.capture_count_grid())
    assert np.array_equal(bs.capture_map(), bs.cnt_reversable())


def test_put_flips_and_switches_turn():
    bs = BoardState(2)

    assert bs.put(0, 2)

    assert bs.board[0, 2] == D
    assert bs.board[1, 2] == D
    assert bs.current_turn() == L
    assert bs.is_it_white_turn()
    assert bs.last_move == (0, 2)
    assert bs.count_pieces() == ((DARK_SYMBOL, 4), (LIGHT_SYMBOL, 1))


def test_capture_map_follows_turn():
    bs = BoardState(2)
    bs.put(0, 2)

    capture_map = bs.capture_map()
    assert capture_map[0, 3] == 1  # Light closes (1,2) against (2,1)
    assert capture_map[0, 2] == 0


def test_multi_direction_flip():
    grid = [
        [E, L, D, E],
        [L, L, E, E],
        [D, E, D, E],
        [E, E, L, E],
    ]
    bs = BoardState.from_grid(grid, turn=D)

    assert bs.capture_map()[0, 0] == 3
    assert bs.put(0, 0) is True
    assert bs.board[0, 1] == D
    assert bs.board[1, 0] == D
    assert bs.board[1, 1] == D
    # Light replies at (1,2) through (2,2) against (3,2).
    assert bs.current_turn() == L
    assert bs.legal_moves() == [(1, 2)]
    assert bs.count_pieces() == ((DARK_SYMBOL, 7), (LIGHT_SYMBOL, 1))


def test_multi_direction_flip_ends_game():
    grid = [
        [E, L, D, E],
        [L, L, E, E],
        [D, E, D, E],
        [E, E, E, E],
    ]
    bs = BoardState.from_grid(grid, turn=D)

    assert bs.put(0, 0) is False
    assert bs.is_over
    assert bs.count_pieces() == ((DARK_SYMBOL, 7), (LIGHT_SYMBOL, 0))


def test_put_illegal_cell_is_noop():
    bs = BoardState(2)
    before = bs.board

    assert bs.put(0, 0) is True
    assert bs.put(1, 1) is True
    assert bs.put(9, 9) is True
    assert bs.put(-1, 0) is True

    assert np.array_equal(bs.board, before)
    assert bs.current_turn() == D
    assert bs.last_move is None


def test_board_property_is_a_copy():
    bs = BoardState(2)
    board = bs.board
    board[0, 0] = D
    assert bs.board[0, 0] == E


def test_forced_pass_keeps_turn():
    grid = [
        [D, L, E, E],
        [E, E, E, E],
        [E, E, E, E],
        [D, L, E, E],
    ]
    bs = BoardState.from_grid(grid, turn=D)

    assert bs.put(0, 2) is True
    # Light cannot move; Dark can still close (3,1) from (3,2).
    assert bs.current_turn() == D
    assert bs.capture_map()[3, 2] == 1


def test_game_over_without_full_board():
    grid = [
        [D, L, E, E],
        [E, E, E, E],
        [E, E, E, E],
        [D, L, E, E],
    ]
    bs = BoardState.from_grid(grid, turn=D)
    bs.put(0, 2)

    assert bs.put(3, 2) is False
    assert bs.is_over
    assert bs.current_turn() == D
    assert bs.count_pieces() == ((DARK_SYMBOL, 6), (LIGHT_SYMBOL, 0))
    assert bs.winner() == D


def test_last_move_fills_board():
    grid = [
        [E, L, D, L],
        [L, L, D, D],
        [D, L, L, D],
        [D, D, L, L],
    ]
    bs = BoardState.from_grid(grid, turn=D)
    assert bs.capture_map()[0, 0] == 2

    assert bs.put(0, 0) is False

    (_, dark), (_, light) = bs.final_counts()
    assert dark + light == 16
    assert (dark, light) == (10, 6)
    assert bs.winner() == D
    assert not bs.capture_map().any()


def test_put_after_game_over_returns_false():
    grid = [
        [E, L, D, L],
        [L, L, D, D],
        [D, L, L, D],
        [D, D, L, L],
    ]
    bs = BoardState.from_grid(grid, turn=D)
    bs.put(0, 0)
    frozen = bs.board

    assert bs.put(0, 0) is False
    assert np.array_equal(bs.board, frozen)


def test_from_grid_detects_finished_position():
    grid = np.full((4, 4), int(D))
    bs = BoardState.from_grid(grid)
    assert bs.is_over
    assert bs.winner() == D


def test_from_grid_passes_turn_when_mover_is_stuck():
    grid = [
        [L, D, E, E],
        [E, E, E, E],
        [E, E, E, E],
        [E, E, E, E],
    ]
    bs = BoardState.from_grid(grid, turn=D)

    assert not bs.is_over
    assert bs.current_turn() == L
    assert bs.legal_moves() == [(0, 2)]


def test_draw_winner():
    grid = np.full((4, 4), int(D))
    grid[2:, :] = int(L)
    bs = BoardState.from_grid(grid)
    assert bs.winner() == E


def test_winner_none_while_running():
    assert BoardState(2).winner() is None


def test_copy_is_independent():
    bs = BoardState(2)
    clone = bs.copy()
    clone.put(0, 2)

    assert bs.board[0, 2] == E
    assert bs.current_turn() == D
    assert clone.current_turn() == L


@pytest.mark.parametrize("half_size,seed", [(2, 0), (3, 1), (4, 2), (4, 3)])
def test_counts_invariants_over_full_game(half_size, seed):
    """Every accepted move adds 1 + captured to the mover and removes captured from the opponent."""
    bs = BoardState(half_size)
    agent = CornerBiasedAgent(seed=seed)
    n = bs.board_size()

    can_continue = True
    placed = 4
    while can_continue:
        capture_map = bs.capture_map()
        occupied = bs.board != E
        assert not capture_map[occupied].any()

        mover = bs.current_turn()
        row, col = agent.act(capture_map, n)
        captured = int(capture_map[row, col])
        (_, dark_before), (_, light_before) = bs.count_pieces()

        can_continue = bs.put(row, col)
        placed += 1

        (_, dark_after), (_, light_after) = bs.count_pieces()
        if mover == D:
            assert dark_after == dark_before + 1 + captured
            assert light_after == light_before - captured
        else:
            assert light_after == light_before + 1 + captured
            assert dark_after == dark_before - captured
        assert dark_after + light_after == placed

    assert bs.is_over
    assert not bs.capture_map().any()
