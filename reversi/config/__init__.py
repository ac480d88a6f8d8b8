"""Config package exports."""

from .schema import AppConfig, GameConfig, MatchConfig, load_config

__all__ = ["AppConfig", "GameConfig", "MatchConfig", "load_config"]
