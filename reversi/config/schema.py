"""Configuration schema for games and matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..board.utils import DEFAULT_SIZE, MIN_SIZE

MODES = ("pvp", "cpu", "watch")
COLORS = ("dark", "light")


def _validate_size(size: int) -> None:
    if size < MIN_SIZE or size % 2 != 0:
        raise ValueError(f"Board size must be an even number >= {MIN_SIZE}, got {size}")


def _get_int(data: Dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key, default)
    if value is None and default is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e


def _get_float(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be a number, got {value!r}") from e


def _get_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _get_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    # YAML parses true/false/yes/no itself; quoted strings are rejected
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' section must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class GameConfig:
    size: int = DEFAULT_SIZE
    mode: str = "cpu"
    human_color: str = "dark"
    start_reversed: bool = False
    seed: Optional[int] = None
    cpu_delay: float = 0.5
    hints: bool = False

    def validate(self) -> "GameConfig":
        _validate_size(self.size)
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.human_color not in COLORS:
            raise ValueError(f"human_color must be one of {COLORS}, got {self.human_color!r}")
        if self.cpu_delay < 0:
            raise ValueError(f"cpu_delay must be non-negative, got {self.cpu_delay}")
        return self

    @property
    def half_size(self) -> int:
        return self.size // 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        cfg = cls(
            size=_get_int(data, "size", DEFAULT_SIZE),
            mode=_get_str(data, "mode", "cpu"),
            human_color=_get_str(data, "human_color", "dark"),
            start_reversed=_get_bool(data, "start_reversed", False),
            seed=_get_int(data, "seed", None),
            cpu_delay=_get_float(data, "cpu_delay", 0.5),
            hints=_get_bool(data, "hints", False),
        )
        return cfg.validate()


@dataclass
class MatchConfig:
    num_games: int = 10
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None
    alternate_colors: bool = True
    render: bool = False
    log_dir: Optional[str] = None

    def validate(self) -> "MatchConfig":
        _validate_size(self.size)
        if self.num_games < 1:
            raise ValueError(f"num_games must be positive, got {self.num_games}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        cfg = cls(
            num_games=_get_int(data, "num_games", 10),
            size=_get_int(data, "size", DEFAULT_SIZE),
            seed=_get_int(data, "seed", None),
            alternate_colors=_get_bool(data, "alternate_colors", True),
            render=_get_bool(data, "render", False),
            log_dir=data.get("log_dir"),
        )
        return cfg.validate()


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    match: MatchConfig = field(default_factory=MatchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game = GameConfig.from_dict(_section(data, "game"))
        match = MatchConfig.from_dict(_section(data, "match"))
        return cls(game=game, match=match)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
