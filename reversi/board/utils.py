"""Shared utilities for Reversi rule logic."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

import numpy as np

Coord = Tuple[int, int]

DEFAULT_SIZE = 8
MIN_SIZE = 4

DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Cell(IntEnum):
    """Cell contents. A color's opponent is its negation."""

    EMPTY = 0
    DARK = 1
    LIGHT = -1


def opponent(player: int) -> Cell:
    """Return the other color."""
    return Cell(-int(player))


def in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def get_flips(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
) -> List[Coord]:
    """
    Get all disks that would be flipped by placing a disk at (row, col).

    A direction contributes only when the run of opponent disks next to
    (row, col) is non-empty and closed by one of the player's own disks.

    Args:
        board: Game board array.
        row: Row position.
        col: Column position.
        player: Color to place (Cell.DARK or Cell.LIGHT).

    Returns:
        List of (row, col) positions that would be flipped.
    """
    size = board.shape[0]
    if not in_bounds(size, row, col) or board[row, col] != Cell.EMPTY:
        return []

    other = -int(player)
    flips: List[Coord] = []

    for dr, dc in DIRECTIONS:
        run: List[Coord] = []
        r, c = row + dr, col + dc

        while in_bounds(size, r, c) and board[r, c] == other:
            run.append((r, c))
            r += dr
            c += dc

        if run and in_bounds(size, r, c) and board[r, c] == player:
            flips.extend(run)

    return flips


def count_flips(board: np.ndarray, row: int, col: int, player: int) -> int:
    """Number of opponent disks captured by a placement at (row, col)."""
    return len(get_flips(board, row, col, player))


def capture_count_grid(board: np.ndarray, player: int) -> np.ndarray:
    """
    Build the capture map for ``player``.

    Args:
        board: Game board array.
        player: Color to move.

    Returns:
        Integer array shaped like ``board``; each entry is the number of
        disks a placement there would flip, 0 for occupied or illegal cells.
    """
    size = board.shape[0]
    counts = np.zeros((size, size), dtype=np.int32)
    for r in range(size):
        for c in range(size):
            counts[r, c] = count_flips(board, r, c, player)
    return counts


def has_legal_move(board: np.ndarray, player: int) -> bool:
    size = board.shape[0]
    return any(
        get_flips(board, r, c, player)
        for r in range(size)
        for c in range(size)
    )


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count disks for each color.

    Returns:
        Tuple of (dark_count, light_count).
    """
    dark = np.sum(board == Cell.DARK)
    light = np.sum(board == Cell.LIGHT)
    return int(dark), int(light)


def corner_cells(size: int) -> Tuple[Coord, ...]:
    last = size - 1
    return ((0, 0), (0, last), (last, 0), (last, last))


def is_corner(size: int, row: int, col: int) -> bool:
    return (row, col) in corner_cells(size)
