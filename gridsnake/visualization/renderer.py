"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Any, Dict, Tuple

from ..core.renderer_interface import RendererInterface
from ..game.types import Direction, FoodType, GameStatus, Position


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
TEXT_COLOR = (220, 220, 220)
DIM_TEXT_COLOR = (150, 150, 150)
GAME_OVER_COLOR = (255, 100, 100)
WIN_COLOR = (255, 215, 0)

FOOD_COLORS = {
    FoodType.NORMAL: (220, 50, 50),
    FoodType.GOLDEN: (255, 215, 0),
    FoodType.BONUS: (170, 80, 255),
}


class SnakeRenderer(RendererInterface):
    """
    Draws a Game.get_game_data() snapshot onto a pygame surface.
    """

    def __init__(self, cell_size: int = 25, board_size: int = 20):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            board_size: Board side length in cells
        """
        super().__init__(cell_size, board_size)

    def _cell_rect(self, position: Position, inset: int) -> pygame.Rect:
        left, top = self.cell_origin(position.x, position.y)
        return pygame.Rect(
            left + inset,
            top + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset,
        )

    def render(self, game_data: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render a game snapshot to a surface.

        Args:
            game_data: Snapshot from Game.get_game_data()
            surface: Pygame surface to draw on
        """
        self.set_board_size(game_data.get("board_size", self._board_size))
        size = self._board_size
        side = size * self._cell_size

        # Draw background
        board_rect = pygame.Rect(self._offset_x, self._offset_y, side, side)
        pygame.draw.rect(surface, DARK_GRAY, board_rect)

        # Draw grid lines (subtle)
        for i in range(size + 1):
            offset = i * self._cell_size
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x + offset, self._offset_y),
                (self._offset_x + offset, self._offset_y + side),
            )
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x, self._offset_y + offset),
                (self._offset_x + side, self._offset_y + offset),
            )

        # Draw food
        food_color = FOOD_COLORS.get(game_data.get("food_type"), FOOD_COLORS[FoodType.NORMAL])
        pygame.draw.rect(surface, food_color, self._cell_rect(game_data["food"], 2), border_radius=4)

        # Draw snake
        for i, segment in enumerate(game_data["snake"]):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, self._cell_rect(segment, 1), border_radius=border_radius)

        head = game_data.get("snake_head")
        if head is not None:
            self._draw_eyes(surface, head, game_data.get("direction", Direction.RIGHT))

    def _draw_eyes(self, surface: pygame.Surface, head: Position, direction: Direction):
        """Draw eyes on the snake's head."""
        cx, cy = self.cell_center(head.x, head.y)

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == Direction.RIGHT:
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == Direction.DOWN:
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == Direction.LEFT:
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)


class StandaloneRenderer(SnakeRenderer):
    """
    Renderer that owns its own pygame window, font and clock.
    """

    def __init__(self, board_size: int = 20, cell_size: int = 30, title: str = "Snake"):
        """
        Create the window.

        Args:
            board_size: Board side length in cells
            cell_size: Size of each grid cell in pixels
            title: Window caption
        """
        super().__init__(cell_size, board_size)

        # Calculate window size with padding
        padding = 40
        self.window_width = board_size * cell_size + padding * 2
        self.window_height = board_size * cell_size + padding * 2 + 60  # Extra for score

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)
        self.set_offset(padding, padding)

        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 28)
        self.large_font = pygame.font.Font(None, 72)
        self.clock = pygame.time.Clock()

    def _blit_centered(self, text_surface, y: int) -> None:
        self.surface.blit(text_surface, (self.window_width // 2 - text_surface.get_width() // 2, y))

    def render_frame(self, game_data: Dict[str, Any], fps: int = 60) -> None:
        """
        Draw a full frame: board, score line and status banner.

        Args:
            game_data: Snapshot from Game.get_game_data()
            fps: Frame rate cap
        """
        state = game_data["state"]

        # Clear screen
        self.surface.fill(BLACK)

        # Render game
        self.render(game_data, self.surface)

        # Render score
        score_text = self.font.render(
            f"Score: {state.score}   Level: {state.level}", True, TEXT_COLOR
        )
        self._blit_centered(score_text, self.window_height - 70)

        high_score_text = self.small_font.render(
            f"High Score: {state.high_score}", True, DIM_TEXT_COLOR
        )
        self._blit_centered(high_score_text, self.window_height - 40)

        banner = {
            GameStatus.READY: ("PRESS ENTER", TEXT_COLOR),
            GameStatus.PAUSED: ("PAUSED", TEXT_COLOR),
            GameStatus.GAME_OVER: ("GAME OVER", GAME_OVER_COLOR),
            GameStatus.WON: ("YOU WIN", WIN_COLOR),
        }.get(state.status)

        if banner is not None:
            text, color = banner
            self._blit_centered(self.large_font.render(text, True, color), self.window_height // 2 - 60)

        # Update display
        pygame.display.flip()
        self.clock.tick(fps)

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
