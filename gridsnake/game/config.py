"""
Snake game configuration.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass
class GameConfig:
    """Board size, tick speed and scoring rules."""

    board_size: int = 20

    # Tick interval in ms; lower is faster
    initial_speed: int = 200
    speed_increment: int = 10
    min_speed: int = 50

    points_per_food: int = 10
    points_for_level_up: int = 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


@dataclass
class FoodConfig:
    """Food scoring and special-food settings."""

    normal_points: int = 10
    special_points: int = 50
    special_chance: float = 0.1
    special_duration: float = 5000  # ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FoodConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
