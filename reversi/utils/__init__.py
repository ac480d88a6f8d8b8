"""Utility modules."""

from .match import GameRecord, play_game, play_match, play_turn
from .metrics import MetricsLogger

__all__ = ["GameRecord", "MetricsLogger", "play_game", "play_match", "play_turn"]
