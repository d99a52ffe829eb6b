"""
Value types shared by the game models.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Position:
    """A cell on the board grid. Immutable, so it can be shared freely."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Position":
        """Create a position from a {"x", "y"} dictionary."""
        return cls(int(data["x"]), int(data["y"]))


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def dx(self) -> int:
        return _VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _VECTORS[self][1]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @classmethod
    def from_name(cls, name: Union[str, "Direction"]) -> Optional["Direction"]:
        """
        Look up a direction by name ("up", "down", "left", "right").

        Returns:
            The matching Direction, or None for anything unrecognised
        """
        if isinstance(name, Direction):
            return name
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name.strip().upper())


# y grows downwards, matching screen coordinates
_VECTORS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


class CollisionType(str, Enum):
    """What the snake's head ran into."""
    WALL = "wall"
    SELF = "self"


class FoodType(str, Enum):
    """Food varieties and how they score."""
    NORMAL = "normal"
    GOLDEN = "golden"   # special_points
    BONUS = "bonus"     # 2 x special_points


class GameStatus(str, Enum):
    """Explicit game state; the boolean flags in GameState are derived from it."""
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"
