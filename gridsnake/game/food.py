"""
Food - the single active food item.

Special food (golden or bonus) reverts to normal after `special_duration`
milliseconds. The expiry is a TimerHandle on a shared TimerQueue, cancelled
whenever the food is eaten, moved or reset.
"""

import logging
import random
from typing import Any, Dict, Iterable, Optional

from ..core.event_emitter import EventEmitter, ErrorHandler
from ..core.timers import TimerHandle, TimerQueue
from .config import FoodConfig
from .types import FoodType, Position

logger = logging.getLogger(__name__)


class Food(EventEmitter):
    """
    Food with a position, a type and an optional expiry timer.

    Events:
        position_changed({position, type, is_special, points}),
        special_expired({position, new_type}), consumed(info), reset()
    """

    def __init__(
        self,
        config: Optional[FoodConfig] = None,
        timers: Optional[TimerQueue] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        Initialize the food.

        Args:
            config: Scoring and special-food settings
            timers: Queue that runs the special-food expiry
            error_handler: Sink for listener exceptions
        """
        super().__init__(error_handler)
        self.config = config or FoodConfig()
        self.timers = timers if timers is not None else TimerQueue()

        self.position = Position(0, 0)
        self.type = FoodType.NORMAL
        self.is_special = False
        self._special_timer: Optional[TimerHandle] = None

    def set_position(self, position: Position) -> None:
        """Place the food and roll its type."""
        self._cancel_special_timer()
        self.position = position
        self._determine_type()

        logger.debug("Food placed at (%d, %d) - type: %s", position.x, position.y, self.type.value)

        self.emit("position_changed", {
            "position": self.position,
            "type": self.type,
            "is_special": self.is_special,
            "points": self.get_points(),
        })

        if self.is_special:
            self._special_timer = self.timers.call_later(
                self.config.special_duration, self._expire_special
            )

    def _determine_type(self) -> None:
        if random.random() < self.config.special_chance:
            self.type = FoodType.GOLDEN if random.random() < 0.5 else FoodType.BONUS
            self.is_special = True
        else:
            self.type = FoodType.NORMAL
            self.is_special = False

    def _cancel_special_timer(self) -> None:
        if self._special_timer is not None:
            self._special_timer.cancel()
            self._special_timer = None

    def _expire_special(self) -> None:
        self._special_timer = None
        if not self.is_special:
            return

        logger.debug("Special food at %s expired", self.position)
        self.type = FoodType.NORMAL
        self.is_special = False
        self.emit("special_expired", {"position": self.position, "new_type": self.type})

    def force_expire(self) -> None:
        """Expire pending special food immediately."""
        if self._special_timer is not None:
            self._cancel_special_timer()
            self._expire_special()

    def get_points(self) -> int:
        if self.type == FoodType.GOLDEN:
            return self.config.special_points
        if self.type == FoodType.BONUS:
            return self.config.special_points * 2
        return self.config.normal_points

    def get_position(self) -> Position:
        return self.position

    def is_at_position(self, position: Position) -> bool:
        return self.position == position

    def get_time_remaining(self) -> float:
        """Milliseconds left before special food reverts (0 if not special)."""
        if not self.is_special or self._special_timer is None:
            return 0.0
        return self._special_timer.remaining()

    def get_info(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "type": self.type,
            "is_special": self.is_special,
            "points": self.get_points(),
            "time_remaining": self.get_time_remaining(),
        }

    def consume(self) -> Dict[str, Any]:
        """
        Eat the food. Call once per placement.

        Returns:
            Snapshot of the food as it was eaten
        """
        info = self.get_info()
        self._cancel_special_timer()

        logger.debug("Food consumed: %s (%d points)", info["type"].value, info["points"])
        self.emit("consumed", info)
        return info

    @staticmethod
    def is_valid_position(position: Position, board_size: int) -> bool:
        return 0 <= position.x < board_size and 0 <= position.y < board_size

    @staticmethod
    def generate_random_position(board_size: int, exclude: Iterable[Position] = ()) -> Optional[Position]:
        """
        Pick a random cell of a board_size x board_size grid outside `exclude`.

        Returns:
            A free position, or None if every cell is excluded
        """
        taken = set(exclude)
        available = [
            Position(x, y)
            for y in range(board_size)
            for x in range(board_size)
            if Position(x, y) not in taken
        ]
        if not available:
            return None
        return random.choice(available)

    def reset(self) -> None:
        """Return to a normal food at the origin."""
        self._cancel_special_timer()
        self.position = Position(0, 0)
        self.type = FoodType.NORMAL
        self.is_special = False
        self.emit("reset")

    def destroy(self) -> None:
        self._cancel_special_timer()
        self.remove_all_listeners()
