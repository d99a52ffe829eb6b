"""
Board - the square spatial domain of the game.

The board owns no entities. It answers questions about coordinates: bounds,
neighbours, distances, free cells and linear indexing.
"""

import logging
import math
import random
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from .types import Position

logger = logging.getLogger(__name__)

# Cell codes used in grid snapshots
CELL_EMPTY = 0
CELL_SNAKE = 1
CELL_HEAD = 2
CELL_FOOD = 3

_CARDINAL_OFFSETS = [(0, -1), (1, 0), (0, 1), (-1, 0)]
_DIAGONAL_OFFSETS = [(-1, -1), (1, -1), (1, 1), (-1, 1)]


class Board:
    """
    A size x size grid of cells addressed by Position(x, y).

    Positions held by callers are not tracked: after resize() they may fall
    outside the new bounds.
    """

    def __init__(self, size: int = 20):
        """
        Initialize the board.

        Args:
            size: Side length in cells
        """
        self._set_size(size)
        logger.debug("Board created: %dx%d (%d cells)", self.size, self.size, self.total_cells)

    def _set_size(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        self.size = size
        self.total_cells = size * size
        self.grid = np.full((size, size), CELL_EMPTY, dtype=np.int8)

    def get_center(self) -> Position:
        """Center cell of the board."""
        return Position(self.size // 2, self.size // 2)

    def is_valid_position(self, position: Position) -> bool:
        """True if the position lies inside the board."""
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def is_edge_position(self, position: Position) -> bool:
        """True for valid cells on the outer ring."""
        if not self.is_valid_position(position):
            return False
        last = self.size - 1
        return position.x in (0, last) or position.y in (0, last)

    def is_corner_position(self, position: Position) -> bool:
        """True for the four corner cells."""
        if not self.is_valid_position(position):
            return False
        last = self.size - 1
        return position.x in (0, last) and position.y in (0, last)

    def get_available_positions(self, occupied: Iterable[Position] = ()) -> List[Position]:
        """
        List every cell not in `occupied`, in row-major order.

        Args:
            occupied: Positions to leave out

        Returns:
            Free positions, ordered by position_to_index
        """
        taken = set(occupied)
        return [
            Position(x, y)
            for y in range(self.size)
            for x in range(self.size)
            if Position(x, y) not in taken
        ]

    def get_adjacent_positions(self, position: Position, include_diagonals: bool = False) -> List[Position]:
        """
        In-bounds neighbours of a position.

        Args:
            position: Center position
            include_diagonals: Use the 8-neighbourhood instead of 4

        Returns:
            Neighbours ordered N, E, S, W (then NW, NE, SE, SW)
        """
        offsets = _CARDINAL_OFFSETS + _DIAGONAL_OFFSETS if include_diagonals else _CARDINAL_OFFSETS
        neighbours = (position.offset(dx, dy) for dx, dy in offsets)
        return [p for p in neighbours if self.is_valid_position(p)]

    @staticmethod
    def get_manhattan_distance(a: Position, b: Position) -> int:
        return abs(a.x - b.x) + abs(a.y - b.y)

    @staticmethod
    def get_euclidean_distance(a: Position, b: Position) -> float:
        return math.hypot(a.x - b.x, a.y - b.y)

    def position_to_index(self, position: Position) -> int:
        """Row-major linear index of a position."""
        return position.y * self.size + position.x

    def index_to_position(self, index: int) -> Position:
        """Inverse of position_to_index."""
        y, x = divmod(index, self.size)
        return Position(x, y)

    def get_random_position(self, exclude: Iterable[Position] = ()) -> Optional[Position]:
        """
        Pick a free cell uniformly at random.

        Args:
            exclude: Positions that may not be chosen

        Returns:
            A free position, or None when the board is full
        """
        available = self.get_available_positions(exclude)
        if not available:
            return None
        return random.choice(available)

    def get_perimeter(self) -> List[Position]:
        """All edge cells in row-major order."""
        return [
            Position(x, y)
            for y in range(self.size)
            for x in range(self.size)
            if self.is_edge_position(Position(x, y))
        ]

    def is_almost_full(self, occupied: Iterable[Position], threshold: float = 0.9) -> bool:
        """True when the occupied share of cells reaches `threshold`."""
        return len(set(occupied)) / self.total_cells >= threshold

    def get_stats(self, occupied: Iterable[Position] = ()) -> Dict[str, Any]:
        """Occupancy statistics for the board."""
        count = len(set(occupied))
        return {
            "size": self.size,
            "total_cells": self.total_cells,
            "occupied": count,
            "available": self.total_cells - count,
            "occupied_percentage": round(count / self.total_cells * 100, 2),
        }

    def get_info(self) -> Dict[str, Any]:
        """Size, center and corners of the board."""
        last = self.size - 1
        return {
            "size": self.size,
            "total_cells": self.total_cells,
            "center": self.get_center(),
            "corners": [
                Position(0, 0),
                Position(last, 0),
                Position(last, last),
                Position(0, last),
            ],
        }

    def get_grid(self) -> np.ndarray:
        """Copy of the empty board grid, indexed [y, x]."""
        return self.grid.copy()

    def render_grid(
        self,
        snake_positions: Iterable[Position] = (),
        food_position: Optional[Position] = None,
    ) -> np.ndarray:
        """
        Build a grid snapshot with the snake and food marked.

        Args:
            snake_positions: Snake cells, head first
            food_position: Current food cell, if any

        Returns:
            int8 array indexed [y, x] holding CELL_* codes
        """
        grid = self.get_grid()

        if food_position is not None and self.is_valid_position(food_position):
            grid[food_position.y, food_position.x] = CELL_FOOD

        for i, segment in enumerate(snake_positions):
            if self.is_valid_position(segment):
                grid[segment.y, segment.x] = CELL_HEAD if i == 0 else CELL_SNAKE

        return grid

    def resize(self, new_size: int) -> None:
        """
        Change the board size and rebuild the grid.

        Args:
            new_size: New side length in cells
        """
        self._set_size(new_size)
        logger.info("Board resized to %dx%d", new_size, new_size)
