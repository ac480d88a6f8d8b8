"""Agent modules."""

from .base_agent import BaseAgent
from .corner_agent import CornerBiasedAgent, select_move

__all__ = ["BaseAgent", "CornerBiasedAgent", "select_move"]
