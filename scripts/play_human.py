#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    Enter: Start (or restart after game over)
    Arrow Keys or WASD: Move the snake
    Space or P: Pause / resume
    R: Reset
    ESC: Quit
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from gridsnake.game import Game, InMemoryHighScoreStore
from gridsnake.utils.config_loader import load_config
from gridsnake.utils.log import setup_logging
from gridsnake.visualization.renderer import StandaloneRenderer
from gridsnake.visualization.terminal_display import TerminalDisplay

logger = logging.getLogger("gridsnake.play_human")

DIRECTION_KEYS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}


def parse_args():
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--board-size", type=int, default=None, help="Override the board size")
    return parser.parse_args()


def handle_key(game: Game, key: int) -> bool:
    """
    Apply a key press to the game.

    Returns:
        False if the player asked to quit
    """
    if key == pygame.K_ESCAPE:
        return False

    if key == pygame.K_RETURN:
        game.start()
    elif key in (pygame.K_SPACE, pygame.K_p):
        game.toggle_pause()
    elif key == pygame.K_r:
        game.reset()
    elif key in DIRECTION_KEYS:
        game.change_direction(DIRECTION_KEYS[key])

    return True


def handle_events(game: Game, events) -> bool:
    """
    Apply one batch of pygame events to the game.

    Every key in the batch is applied, but a quit anywhere in the batch
    wins over later keys.

    Returns:
        False if the window was closed or ESC was pressed
    """
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if not handle_key(game, event.key):
                running = False
    return running


def main():
    """Main entry point for human play mode."""
    args = parse_args()

    overrides = {"game": {"board_size": args.board_size}} if args.board_size else None
    config = load_config(args.config, overrides=overrides)
    setup_logging(config.logging)

    game = Game(
        config.game,
        food_config=config.food,
        high_score_store=InMemoryHighScoreStore(),
    )
    display = TerminalDisplay(game)

    renderer = StandaloneRenderer(
        board_size=config.game.board_size,
        cell_size=config.display.cell_size,
        title=config.display.title,
    )

    logger.info("Enter: start | Arrows/WASD: move | Space: pause | R: reset | ESC: quit")

    # The game never schedules itself: tick it every `speed` ms
    running = True
    last_tick = pygame.time.get_ticks()

    while running:
        running = handle_events(game, pygame.event.get())

        now = pygame.time.get_ticks()
        if now - last_tick >= game.get_current_speed():
            game.update()
            last_tick = now
        else:
            # Keep special-food expiry moving between ticks
            game.timers.run_due()

        renderer.render_frame(game.get_game_data(), fps=config.display.fps)

    display.console.print(display.summary_panel())
    display.detach()
    game.destroy()
    renderer.close()


if __name__ == "__main__":
    main()
