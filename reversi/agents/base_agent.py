"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..board.utils import Coord


class BaseAgent(ABC):
    """Base class for automated players."""

    @abstractmethod
    def act(self, capture_map: np.ndarray, board_size: int) -> Coord:
        """Return a (row, col) move given the capture map of the player to move."""

    def select_action(self, board_state) -> Coord:
        """Pick a move using only the public surface of a BoardState."""
        return self.act(board_state.capture_map(), board_state.board_size())
