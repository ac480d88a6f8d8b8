"""Capture-weighted random agent with a corner preference."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

import numpy as np

from ..board.utils import Coord, is_corner
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


def select_move(
    capture_map: np.ndarray,
    board_size: int,
    rng: Optional[random.Random] = None,
) -> Coord:
    """
    Choose a move from a capture map.

    Every legal cell enters a weighted pool once per disk it would capture;
    legal corners also enter a separate corner pool. A corner is drawn
    uniformly whenever one is available, otherwise a cell is drawn uniformly
    from the weighted pool.

    Args:
        capture_map: (board_size, board_size) array of capture counts
        board_size: Side length of the board
        rng: Object with a ``choice`` method; defaults to the ``random`` module

    Returns:
        Selected (row, col)
    """
    if rng is None:
        rng = random

    options: List[Coord] = []
    corners: List[Coord] = []
    for i in range(board_size):
        for j in range(board_size):
            weight = int(capture_map[i][j])
            if weight <= 0:
                continue
            options.extend([(i, j)] * weight)
            if is_corner(board_size, i, j):
                corners.append((i, j))

    if not options:
        raise ValueError("No legal moves available")

    return rng.choice(corners if corners else options)


class CornerBiasedAgent(BaseAgent):
    """
    Automated opponent for Reversi.

    Strategy:
    1. Any legal corner is taken, chosen uniformly among legal corners
    2. Otherwise a move is drawn at random, weighted by its capture count
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the agent.

        Args:
            seed: Random seed for reproducibility
            rng: Pre-built generator; takes precedence over ``seed``
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def act(self, capture_map: np.ndarray, board_size: int) -> Coord:
        move = select_move(capture_map, board_size, self._rng)
        logger.debug("Agent chose %s (captures %d)", move, int(capture_map[move[0]][move[1]]))
        return move
