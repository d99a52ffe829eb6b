"""
Renderer base for gridsnake front ends.

A renderer reads the snapshot from Game.get_game_data() and draws it. It
never mutates the simulation. Grid geometry (cell size, board size and the
board's offset on the target) lives here so every backend maps cells to
pixels the same way.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple


class RendererInterface(ABC):
    """
    Base class for renderers that draw a square board of cells.

    Subclasses implement render(); the geometry helpers are shared.
    """

    def __init__(self, cell_size: int = 20, board_size: int = 20):
        self._cell_size = cell_size
        self._board_size = board_size
        self._offset_x = 0
        self._offset_y = 0

    @abstractmethod
    def render(self, game_data: Dict[str, Any], surface: Any) -> None:
        """
        Draw a game snapshot.

        Args:
            game_data: Snapshot from Game.get_game_data()
            surface: Backend-specific drawing target
        """
        pass

    def get_preferred_size(self) -> Tuple[int, int]:
        """(width, height) in pixels needed for the whole board."""
        side = self._board_size * self._cell_size
        return (side, side)

    def get_cell_size(self) -> int:
        return self._cell_size

    def set_cell_size(self, cell_size: int) -> None:
        self._cell_size = cell_size

    def set_board_size(self, board_size: int) -> None:
        """Follow a resized board."""
        self._board_size = board_size

    def set_offset(self, x: int, y: int) -> None:
        """Set the top-left corner of the board on the target."""
        self._offset_x = x
        self._offset_y = y

    def cell_origin(self, x: int, y: int) -> Tuple[int, int]:
        """Pixel coordinates of the top-left corner of cell (x, y)."""
        return (
            self._offset_x + x * self._cell_size,
            self._offset_y + y * self._cell_size,
        )

    def cell_center(self, x: int, y: int) -> Tuple[int, int]:
        """Pixel coordinates of the center of cell (x, y)."""
        left, top = self.cell_origin(x, y)
        half = self._cell_size // 2
        return (left + half, top + half)
