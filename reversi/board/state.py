"""Mutable Reversi board state: the authoritative rules engine."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .utils import (
    Cell,
    Coord,
    DEFAULT_SIZE,
    MIN_SIZE,
    capture_count_grid as build_capture_map,
    count_pieces,
    get_flips,
    has_legal_move,
    in_bounds,
    opponent,
)

logger = logging.getLogger(__name__)

DARK_SYMBOL = "●"
LIGHT_SYMBOL = "○"
EMPTY_SYMBOL = "·"

_SYMBOLS = {
    Cell.EMPTY: EMPTY_SYMBOL,
    Cell.DARK: DARK_SYMBOL,
    Cell.LIGHT: LIGHT_SYMBOL,
}


class BoardState:
    """
    Reversi (Othello) board of side ``2 * half_size``.

    Owns the grid and the turn, and applies every rule: legality through the
    capture map, flipping, forced passes and game end. A single instance is
    created per game and mutated in place by :meth:`put`.
    """

    def __init__(self, half_size: int = DEFAULT_SIZE // 2, start_reversed: bool = False):
        """
        Initialize the opening position.

        Args:
            half_size: Half of the board side; must be at least 2
            start_reversed: Swap the colors of the four center disks
        """
        if half_size < MIN_SIZE // 2:
            raise ValueError(f"half_size must be >= {MIN_SIZE // 2}, got {half_size}")

        self.size = 2 * half_size
        self._board = np.zeros((self.size, self.size), dtype=np.int8)

        first, second = (Cell.LIGHT, Cell.DARK) if start_reversed else (Cell.DARK, Cell.LIGHT)
        mid = half_size
        self._board[mid - 1, mid - 1] = first
        self._board[mid, mid] = first
        self._board[mid - 1, mid] = second
        self._board[mid, mid - 1] = second

        self._turn = Cell.DARK
        self._over = False
        self._last_move: Optional[Coord] = None

    @classmethod
    def from_size(cls, size: int, start_reversed: bool = False) -> "BoardState":
        """Build a board from its full side length (even, at least 4)."""
        if size < MIN_SIZE or size % 2 != 0:
            raise ValueError(f"Board size must be an even number >= {MIN_SIZE}, got {size}")
        return cls(size // 2, start_reversed)

    @classmethod
    def from_grid(cls, grid, turn: Cell = Cell.DARK) -> "BoardState":
        """
        Build a board from an explicit position.

        Args:
            grid: Square, even-sized array-like of Cell values
            turn: Color to move

        Returns:
            BoardState holding a copy of ``grid``; marked over when neither
            color has a legal move. If ``turn`` has no move the turn passes.
        """
        board = np.array(grid, dtype=np.int8)
        if board.ndim != 2 or board.shape[0] != board.shape[1]:
            raise ValueError(f"Grid must be square, got shape {board.shape}")
        if not np.isin(board, [int(c) for c in Cell]).all():
            raise ValueError("Grid may only contain Cell values")
        state = cls.from_size(board.shape[0])
        state._board = board
        state._turn = Cell(int(turn))
        state._over = not (has_legal_move(board, Cell.DARK) or has_legal_move(board, Cell.LIGHT))
        if not state._over and not has_legal_move(board, state._turn):
            state._turn = opponent(state._turn)
        return state

    # ------------------------------------------------------------------ queries

    def board_size(self) -> int:
        return self.size

    get_size = board_size

    @property
    def board(self) -> np.ndarray:
        """Copy of the grid (Cell values)."""
        return self._board.copy()

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def last_move(self) -> Optional[Coord]:
        return self._last_move

    def render_grid(self) -> List[List[str]]:
        """Display symbols for every cell, row by row."""
        return [[_SYMBOLS[Cell(int(v))] for v in row] for row in self._board]

    show_board = render_grid

    def capture_map(self) -> np.ndarray:
        """Capture counts for the player to move, recomputed on every call."""
        return build_capture_map(self._board, self._turn)

    capture_count_grid = capture_map
    cnt_reversable = capture_map

    def legal_moves(self) -> List[Coord]:
        rows, cols = np.nonzero(self.capture_map())
        return sorted(zip(rows.tolist(), cols.tolist()))

    def current_turn(self) -> Cell:
        return self._turn

    def current_turn_label(self) -> str:
        return _SYMBOLS[self._turn]

    which_turn = current_turn_label

    def is_it_white_turn(self) -> bool:
        return self._turn == Cell.LIGHT

    def count_pieces(self) -> Tuple[Tuple[str, int], Tuple[str, int]]:
        """Return ((dark_label, dark_count), (light_label, light_count))."""
        dark, light = count_pieces(self._board)
        return (DARK_SYMBOL, dark), (LIGHT_SYMBOL, light)

    final_counts = count_pieces

    def winner(self) -> Optional[Cell]:
        """Winning color, Cell.EMPTY for a draw, None while the game is running."""
        if not self._over:
            return None
        dark, light = count_pieces(self._board)
        if dark > light:
            return Cell.DARK
        if light > dark:
            return Cell.LIGHT
        return Cell.EMPTY

    @staticmethod
    def black_piece() -> str:
        return DARK_SYMBOL

    @staticmethod
    def white_piece() -> str:
        return LIGHT_SYMBOL

    @staticmethod
    def color_labels() -> Tuple[str, str]:
        return DARK_SYMBOL, LIGHT_SYMBOL

    @staticmethod
    def label_of(color: int) -> str:
        return _SYMBOLS[Cell(int(color))]

    def copy(self) -> "BoardState":
        clone = BoardState.__new__(BoardState)
        clone.size = self.size
        clone._board = self._board.copy()
        clone._turn = self._turn
        clone._over = self._over
        clone._last_move = self._last_move
        return clone

    # ----------------------------------------------------------------- mutation

    def put(self, row: int, col: int) -> bool:
        """
        Place a disk for the player to move and advance the turn.

        Illegal placements (finished game, out of bounds, occupied or
        capturing nothing) are rejected without touching the board.

        Args:
            row: Row index
            col: Column index

        Returns:
            True while play can continue, False once neither color can move.
        """
        if self._over:
            logger.warning("Ignoring move (%d, %d): the game is already over", row, col)
            return False

        if not in_bounds(self.size, row, col):
            logger.warning("Ignoring move (%d, %d): outside a %dx%d board", row, col, self.size, self.size)
            return True

        mover = self._turn
        flips = get_flips(self._board, row, col, mover)
        if not flips:
            logger.warning("Ignoring illegal move (%d, %d) for %s", row, col, mover.name)
            return True

        self._board[row, col] = mover
        for flip_row, flip_col in flips:
            self._board[flip_row, flip_col] = mover
        self._last_move = (row, col)

        other = opponent(mover)
        if has_legal_move(self._board, other):
            self._turn = other
            return True

        if has_legal_move(self._board, mover):
            logger.debug("%s has no legal move and passes", other.name)
            return True

        self._over = True
        dark, light = count_pieces(self._board)
        logger.debug("Game over: dark=%d light=%d", dark, light)
        return False

    apply_move = put

    def __repr__(self) -> str:
        rows = "\n".join(" ".join(row) for row in self.render_grid())
        return f"BoardState(size={self.size}, turn={self._turn.name})\n{rows}"
