"""Reversi board package."""

from .state import BoardState, DARK_SYMBOL, EMPTY_SYMBOL, LIGHT_SYMBOL
from .utils import (
    Cell,
    Coord,
    DEFAULT_SIZE,
    MIN_SIZE,
    capture_count_grid,
    corner_cells,
    count_flips,
    count_pieces,
    get_flips,
    has_legal_move,
    is_corner,
    opponent,
)

__all__ = [
    "BoardState",
    "Cell",
    "Coord",
    "DARK_SYMBOL",
    "DEFAULT_SIZE",
    "EMPTY_SYMBOL",
    "LIGHT_SYMBOL",
    "MIN_SIZE",
    "capture_count_grid",
    "corner_cells",
    "count_flips",
    "count_pieces",
    "get_flips",
    "has_legal_move",
    "is_corner",
    "opponent",
]
