"""
Game - orchestrates Board, Snake and Food into a playable run.

The game never schedules itself. An external driver calls update() once per
tick, every `state.speed` milliseconds, and re-reads the speed after each
level_up event.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional, Union

from ..core.event_emitter import EventEmitter, ErrorHandler
from ..core.timers import TimerQueue
from .board import Board
from .config import FoodConfig, GameConfig
from .food import Food
from .high_score import HighScoreStore, NullHighScoreStore
from .snake import Snake
from .types import CollisionType, Direction, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Snapshot of a run. Only Game mutates its own copy."""
    is_playing: bool = False
    is_paused: bool = False
    is_game_over: bool = False
    score: int = 0
    high_score: int = 0
    level: int = 1
    speed: int = 200
    food_eaten: int = 0
    status: GameStatus = GameStatus.READY

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


class Game(EventEmitter):
    """
    Top-level snake simulation.

    Owns exactly one Board, Snake and Food. The status moves between
    READY, PLAYING, PAUSED, GAME_OVER and WON; the is_playing / is_paused /
    is_game_over flags in GameState are derived from it, so is_playing and
    is_game_over are never both true.

    Events:
        state_change(state), game_start(state), game_pause({is_paused}),
        game_over({score, high_score, level}), game_win({...same}),
        game_reset(state), food_eaten({score, level, food_position, food}),
        level_up({level, speed}), new_high_score(score), snake_move(move),
        game_update(game_data), config_change(config)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        food_config: Optional[FoodConfig] = None,
        high_score_store: Optional[HighScoreStore] = None,
        timers: Optional[TimerQueue] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Board size, speed and scoring rules
            food_config: Food points and special-food settings
            high_score_store: High-score persistence (defaults to none)
            timers: Queue for deferred callbacks such as special-food expiry
            error_handler: Sink for listener exceptions, shared with the models
        """
        super().__init__(error_handler)
        self.config = config or GameConfig()
        self.timers = timers if timers is not None else TimerQueue()
        self.high_score_store = high_score_store or NullHighScoreStore()

        self.state = GameState(
            high_score=self._load_high_score(),
            speed=self.config.initial_speed,
        )

        self.board = Board(self.config.board_size)
        self.snake = Snake(self.board.get_center(), error_handler)
        self.food = Food(food_config, self.timers, error_handler)

        self.snake.on("move", self._handle_snake_move)
        self._generate_food()

        logger.info(
            "Game initialized: %dx%d board, speed %dms",
            self.board.size, self.board.size, self.state.speed,
        )
        self.emit("state_change", self.get_state())

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _set_status(self, status: GameStatus) -> None:
        self.state.status = status
        self.state.is_playing = status in (GameStatus.PLAYING, GameStatus.PAUSED)
        self.state.is_paused = status == GameStatus.PAUSED
        self.state.is_game_over = status == GameStatus.GAME_OVER

    def start(self) -> None:
        """Start playing. A finished run is reset first."""
        if self.state.is_playing:
            logger.debug("start() ignored: already playing")
            return

        if self.state.status in (GameStatus.GAME_OVER, GameStatus.WON):
            self.reset()

        self._set_status(GameStatus.PLAYING)
        logger.info("Game started")

        self.emit("game_start", self.get_state())
        self.emit("state_change", self.get_state())

    def toggle_pause(self) -> None:
        """Pause a running game, or resume a paused one."""
        if not self.state.is_playing:
            logger.debug("toggle_pause() ignored: game is %s", self.state.status.value)
            return

        paused = self.state.status == GameStatus.PLAYING
        self._set_status(GameStatus.PAUSED if paused else GameStatus.PLAYING)
        logger.info("Game %s", "paused" if paused else "resumed")

        self.emit("game_pause", {"is_paused": self.state.is_paused})
        self.emit("state_change", self.get_state())

    def reset(self) -> None:
        """Return to READY with a fresh snake, food and score."""
        self.state = GameState(
            high_score=self.state.high_score,
            speed=self.config.initial_speed,
        )
        self.snake.reset(self.board.get_center())
        self._generate_food()

        logger.info("Game reset")
        self.emit("game_reset", self.get_state())
        self.emit("state_change", self.get_state())

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self) -> None:
        """
        Advance the simulation one tick.

        Due timers run first. Nothing else happens unless the game is
        playing and not paused.
        """
        self.timers.run_due()

        if self.state.status != GameStatus.PLAYING:
            return

        result = self.snake.move(self.board)
        if not result.success:
            self._handle_game_over(result.collision)
            return

        if self.food.is_at_position(result.new_head):
            self._handle_food_eaten()

        self.emit("game_update", self.get_game_data())

    def _handle_snake_move(self, data: Dict[str, Any]) -> None:
        self.emit("snake_move", data)

    def _handle_food_eaten(self) -> None:
        eaten = self.food.consume()
        self.snake.grow()
        self._update_score()

        if not self._generate_food():
            self._handle_win()
        self._check_level_up()

        self.emit("food_eaten", {
            "score": self.state.score,
            "level": self.state.level,
            "food_position": self.food.get_position(),
            "food": eaten,
        })

    def _update_score(self) -> None:
        self.state.score += self.config.points_per_food
        self.state.food_eaten += 1

        if self.state.score > self.state.high_score:
            self.state.high_score = self.state.score
            self._save_high_score(self.state.high_score)
            self.emit("new_high_score", self.state.high_score)

        logger.debug("Score: %d", self.state.score)

    def _check_level_up(self) -> None:
        new_level = self.state.score // self.config.points_for_level_up + 1
        if new_level <= self.state.level:
            return

        self.state.level = new_level
        self.state.speed = max(
            self.config.min_speed,
            self.state.speed - self.config.speed_increment,
        )
        logger.info("Level up! Level %d, speed %dms", self.state.level, self.state.speed)

        self.emit("level_up", {"level": self.state.level, "speed": self.state.speed})

    def _generate_food(self) -> bool:
        """
        Place the food on a random free cell.

        Returns:
            False if the snake fills the board and nothing could be placed
        """
        position = self.board.get_random_position(self.snake.get_positions())
        if position is None:
            return False

        self.food.set_position(position)
        return True

    def _handle_game_over(self, collision: Optional[CollisionType]) -> None:
        self._set_status(GameStatus.GAME_OVER)
        logger.info(
            "Game over (%s collision) - score %d, level %d",
            collision.value if collision else "unknown", self.state.score, self.state.level,
        )

        self.emit("game_over", self._result_payload())
        self.emit("state_change", self.get_state())

    def _handle_win(self) -> None:
        self._set_status(GameStatus.WON)
        logger.info("Board full - game won with score %d", self.state.score)

        self.emit("game_win", self._result_payload())
        self.emit("state_change", self.get_state())

    def _result_payload(self) -> Dict[str, int]:
        return {
            "score": self.state.score,
            "high_score": self.state.high_score,
            "level": self.state.level,
        }

    # ------------------------------------------------------------------
    # Input and queries
    # ------------------------------------------------------------------

    def change_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Steer the snake. Ignored unless the game is running and not paused.

        Returns:
            True if the snake accepted the direction
        """
        if self.state.status != GameStatus.PLAYING:
            return False
        return self.snake.set_direction(direction)

    def get_state(self) -> GameState:
        """Copy of the current state."""
        return replace(self.state)

    def get_game_data(self) -> Dict[str, Any]:
        """
        Render snapshot for views.

        Returns:
            Dictionary with the numpy board grid, snake cells, head, food
            position and type, direction and a state copy
        """
        positions = self.snake.get_positions()
        return {
            "board": self.board.render_grid(positions, self.food.get_position()),
            "board_size": self.board.size,
            "snake": positions,
            "snake_head": self.snake.get_head(),
            "food": self.food.get_position(),
            "food_type": self.food.type,
            "direction": self.snake.current_direction,
            "state": self.get_state(),
        }

    def get_current_speed(self) -> int:
        """Current tick interval in milliseconds."""
        return self.state.speed

    def update_config(self, **changes: Any) -> None:
        """
        Change configuration values.

        A new board_size resizes the board and resets the run.

        Raises:
            ValueError: If a key is not a GameConfig field, or board_size
                is not a positive integer. The config is left unchanged.
        """
        known = {f.name for f in fields(GameConfig)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        new_config = replace(self.config, **changes)
        resized = new_config.board_size != self.board.size

        # Board rejects a bad size before any state changes
        if resized:
            self.board.resize(new_config.board_size)
        self.config = new_config

        if resized:
            self.reset()

        logger.info("Config updated: %s", changes)
        self.emit("config_change", self.config)

    # ------------------------------------------------------------------
    # High score persistence
    # ------------------------------------------------------------------

    def _load_high_score(self) -> int:
        try:
            return int(self.high_score_store.load_high_score())
        except Exception:
            logger.warning("Could not load high score, starting from 0", exc_info=True)
            return 0

    def _save_high_score(self, score: int) -> None:
        try:
            self.high_score_store.save_high_score(score)
        except Exception:
            logger.warning("Could not save high score %d", score, exc_info=True)

    def destroy(self) -> None:
        """Release timers and listeners. The game is unusable afterwards."""
        self.food.destroy()
        self.snake.destroy()
        self.remove_all_listeners()
        logger.debug("Game destroyed")
