"""
Terminal Display - Rich-based event feed and board dump.

Subscribes to a Game's events and prints one styled line per notable event.
It is a plain collaborator: it reads payloads and snapshots, nothing more.
"""

from typing import Any, Callable, Dict, List, Optional

import numpy as np
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..game.board import CELL_EMPTY, CELL_FOOD, CELL_HEAD, CELL_SNAKE
from ..game.game import Game, GameState

CELL_GLYPHS = {
    CELL_EMPTY: (". ", "dim"),
    CELL_SNAKE: ("o ", "green"),
    CELL_HEAD: ("@ ", "bold bright_green"),
    CELL_FOOD: ("* ", "bold red"),
}


def render_board_text(game_data: Dict[str, Any]) -> Text:
    """
    Render the board grid of a snapshot as styled text.

    Args:
        game_data: Snapshot from Game.get_game_data()

    Returns:
        One line per board row
    """
    grid: np.ndarray = game_data["board"]
    text = Text()

    for y, row in enumerate(grid):
        for cell in row:
            glyph, style = CELL_GLYPHS.get(int(cell), CELL_GLYPHS[CELL_EMPTY])
            text.append(glyph, style=style)
        if y < len(grid) - 1:
            text.append("\n")

    return text


class TerminalDisplay:
    """
    Prints game events to a rich console.

    Call detach() to stop listening.
    """

    def __init__(self, game: Game, console: Optional[Console] = None):
        """
        Attach to a game.

        Args:
            game: Game whose events are shown
            console: Console to print to (defaults to stdout)
        """
        self.game = game
        self.console = console or Console()
        self._unsubscribers: List[Callable[[], None]] = []

        handlers = {
            "game_start": self._on_game_start,
            "game_pause": self._on_game_pause,
            "food_eaten": self._on_food_eaten,
            "level_up": self._on_level_up,
            "new_high_score": self._on_new_high_score,
            "game_over": self._on_game_over,
            "game_win": self._on_game_win,
        }
        for event, handler in handlers.items():
            self._unsubscribers.append(game.on(event, handler))

    def detach(self) -> None:
        """Remove every subscription made by this display."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_game_start(self, state: GameState) -> None:
        self.console.print(f"[bold cyan]Game started[/] (speed {state.speed}ms)")

    def _on_game_pause(self, payload: Dict[str, bool]) -> None:
        self.console.print("[yellow]Paused[/]" if payload["is_paused"] else "[yellow]Resumed[/]")

    def _on_food_eaten(self, payload: Dict[str, Any]) -> None:
        food = payload["food"]
        self.console.print(
            f"[green]Ate {food['type'].value} food[/] - score {payload['score']}"
        )

    def _on_level_up(self, payload: Dict[str, int]) -> None:
        self.console.print(
            f"[bold magenta]Level {payload['level']}![/] speed {payload['speed']}ms"
        )

    def _on_new_high_score(self, score: int) -> None:
        self.console.print(f"[bold yellow]New high score: {score}[/]")

    def _on_game_over(self, payload: Dict[str, int]) -> None:
        self.console.print(
            f"[bold red]Game over[/] - score {payload['score']}, "
            f"level {payload['level']}, high score {payload['high_score']}"
        )

    def _on_game_win(self, payload: Dict[str, int]) -> None:
        self.console.print(
            f"[bold yellow]Board cleared - you win![/] score {payload['score']}"
        )

    def summary_panel(self) -> Panel:
        """Panel with the current state of the game."""
        state = self.game.get_state()

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Status", state.status.value.replace("_", " "))
        table.add_row("Score", str(state.score))
        table.add_row("High Score", str(state.high_score))
        table.add_row("Level", str(state.level))
        table.add_row("Speed", f"{state.speed}ms")
        table.add_row("Food Eaten", str(state.food_eaten))
        table.add_row("Length", str(self.game.snake.get_length()))

        return Panel(table, title="Snake", border_style="green")
