"""
Pytest configuration and fixtures for gridsnake tests.

Provides a manually advanced clock for timer tests, game factories, and a
pygame mock so the renderer can be tested without a display.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """A manual millisecond clock starting at 0."""
    return ManualClock()


@pytest.fixture
def timers(clock):
    """A TimerQueue driven by the manual clock."""
    from gridsnake.core.timers import TimerQueue

    return TimerQueue(clock)


@pytest.fixture
def make_game(timers):
    """
    Factory for games with predictable food.

    Special food is disabled unless food_config is given, and every game
    shares the manual-clock timer queue.
    """
    from gridsnake.game import FoodConfig, Game, GameConfig

    created = []

    def factory(food_config=None, high_score_store=None, error_handler=None, **config):
        game = Game(
            GameConfig(**config),
            food_config=food_config or FoodConfig(special_chance=0.0),
            high_score_store=high_score_store,
            timers=timers,
            error_handler=error_handler,
        )
        created.append(game)
        return game

    yield factory

    for game in created:
        game.destroy()


@pytest.fixture
def recorder():
    """Collects (event, args) tuples from any number of emitters."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def listen(self, emitter, *events):
            for event in events:
                emitter.on(event, lambda *args, _event=event: self.calls.append((_event, args)))

        def names(self):
            return [event for event, _ in self.calls]

        def payloads(self, event):
            return [args[0] if args else None for name, args in self.calls if name == event]

    return Recorder()


def create_mock_pygame():
    """Create a mock of the parts of pygame the renderer uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 680
    mock_surface.get_height.return_value = 740
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_text = MagicMock()
    mock_text.get_width.return_value = 100
    mock_font = MagicMock()
    mock_font.render.return_value = mock_text
    mock_pygame.font.Font.return_value = mock_font

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_p = 112
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Runs for every test so the renderer modules always see the mock.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_surface():
    """Provide a mock pygame surface."""
    surface = MagicMock()
    surface.get_width.return_value = 680
    surface.get_height.return_value = 740
    return surface
