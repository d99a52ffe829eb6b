"""
Snake - movement, collision detection and deferred growth.

Direction changes are buffered: set_direction() only writes next_direction,
and move() commits it. A turn requested between two ticks therefore takes
effect exactly one tick later and is checked against the direction the snake
is actually travelling in.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.event_emitter import EventEmitter, ErrorHandler
from .board import Board
from .types import CollisionType, Direction, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single Snake.move() call."""
    success: bool
    collision: Optional[CollisionType]
    new_head: Position


class Snake(EventEmitter):
    """
    An ordered body of cells, head first.

    Events:
        reset(positions), move({head, tail, direction, length}),
        collision({position, type}), tail_removed(position),
        grow({new_length, head}), direction_change({direction}),
        state_restored(info)
    """

    initial_length = 3

    def __init__(
        self,
        start_position: Position = Position(10, 10),
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        Initialize the snake.

        Args:
            start_position: Cell of the head; the body trails to the left
            error_handler: Sink for listener exceptions
        """
        super().__init__(error_handler)
        self.initial_position = start_position
        self.positions: List[Position] = []
        self.current_direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.just_ate = False

        self.reset(start_position)

    def reset(self, start_position: Optional[Position] = None) -> None:
        """Rebuild a straight body facing right and clear pending growth."""
        if start_position is None:
            start_position = self.initial_position
        else:
            self.initial_position = start_position

        self.positions = [
            start_position.offset(-i, 0) for i in range(self.initial_length)
        ]
        self.current_direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.just_ate = False

        logger.debug("Snake reset at %s", start_position)
        self.emit("reset", self.get_positions())

    def move(self, board: Board) -> MoveResult:
        """
        Advance the snake one cell.

        Args:
            board: Board used for the wall check

        Returns:
            MoveResult; on collision the body is left untouched
        """
        self.current_direction = self.next_direction
        direction = self.current_direction
        new_head = self.positions[0].offset(direction.dx, direction.dy)

        collision = self._check_collisions(new_head, board)
        if collision is not None:
            logger.debug("Snake collision (%s) at %s", collision.value, new_head)
            self.emit("collision", {"position": new_head, "type": collision})
            return MoveResult(False, collision, new_head)

        self.positions.insert(0, new_head)

        if self.just_ate:
            self.just_ate = False
        else:
            removed = self.positions.pop()
            self.emit("tail_removed", removed)

        self.emit("move", {
            "head": new_head,
            "tail": self.positions[-1],
            "direction": direction,
            "length": len(self.positions),
        })
        return MoveResult(True, None, new_head)

    def _check_collisions(self, new_head: Position, board: Board) -> Optional[CollisionType]:
        if not board.is_valid_position(new_head):
            return CollisionType.WALL

        # The tail moves out of the way this tick unless growth is pending
        body = self.positions if self.just_ate else self.positions[:-1]
        if new_head in body:
            return CollisionType.SELF

        return None

    def set_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Queue a direction for the next move.

        Unknown names and reversals are ignored without raising.

        Args:
            direction: A Direction or one of "up", "down", "left", "right"

        Returns:
            True if the direction was accepted
        """
        new_direction = Direction.from_name(direction)
        if new_direction is None:
            logger.warning("Ignoring invalid direction: %r", direction)
            return False

        if self.is_opposite_direction(new_direction):
            logger.debug("Ignoring reversal to %s", new_direction.name.lower())
            return False

        self.next_direction = new_direction
        self.emit("direction_change", {"direction": new_direction})
        return True

    def is_opposite_direction(self, direction: Direction) -> bool:
        return direction == self.current_direction.opposite

    def grow(self) -> None:
        """Keep the tail on the next move, lengthening the snake by one."""
        self.just_ate = True
        self.emit("grow", {"new_length": len(self.positions) + 1, "head": self.get_head()})

    def get_head(self) -> Position:
        return self.positions[0]

    def get_tail(self) -> Position:
        return self.positions[-1]

    def get_positions(self) -> List[Position]:
        """Copy of the body, head first."""
        return list(self.positions)

    def get_body(self) -> List[Position]:
        """Body without the head."""
        return self.positions[1:]

    def get_length(self) -> int:
        return len(self.positions)

    def occupies_position(self, position: Position) -> bool:
        return position in self.positions

    def can_move_in_direction(self, direction: Union[Direction, str]) -> bool:
        resolved = Direction.from_name(direction)
        return resolved is not None and not self.is_opposite_direction(resolved)

    def get_valid_directions(self) -> List[Direction]:
        """Directions set_direction() would currently accept."""
        return [d for d in Direction if self.can_move_in_direction(d)]

    def get_info(self) -> Dict[str, Any]:
        """Full description of the snake for debugging and UIs."""
        return {
            "head": self.get_head(),
            "tail": self.get_tail(),
            "body": self.get_body(),
            "positions": self.get_positions(),
            "length": self.get_length(),
            "current_direction": self.current_direction,
            "next_direction": self.next_direction,
            "just_ate": self.just_ate,
        }

    def serialize(self) -> Dict[str, Any]:
        """JSON-friendly snapshot of the snake."""
        return {
            "positions": [p.to_dict() for p in self.positions],
            "current_direction": self.current_direction.name.lower(),
            "next_direction": self.next_direction.name.lower(),
            "just_ate": self.just_ate,
            "length": len(self.positions),
        }

    def deserialize(self, state: Dict[str, Any]) -> None:
        """
        Restore a snapshot produced by serialize().

        Raises:
            ValueError: If the snapshot is empty or names an unknown direction
        """
        positions = [
            p if isinstance(p, Position) else Position.from_dict(p)
            for p in state["positions"]
        ]
        current = Direction.from_name(state["current_direction"])
        pending = Direction.from_name(state.get("next_direction", state["current_direction"]))

        if not positions:
            raise ValueError("Snake state has no positions")
        if current is None or pending is None:
            raise ValueError(f"Snake state has an invalid direction: {state!r}")

        self.positions = positions
        self.current_direction = current
        self.next_direction = pending
        self.just_ate = bool(state.get("just_ate", False))

        logger.debug("Snake state restored (length %d)", len(positions))
        self.emit("state_restored", self.get_info())

    def destroy(self) -> None:
        """Drop all listeners and the body."""
        self.remove_all_listeners()
        self.positions = []
