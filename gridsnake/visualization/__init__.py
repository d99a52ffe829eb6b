"""
Front ends for the simulation: a pygame renderer and a rich terminal feed.

The pygame renderer is imported from .renderer directly so that headless
users of the terminal display do not need a display backend.
"""

from .terminal_display import TerminalDisplay, render_board_text

__all__ = [
    'TerminalDisplay',
    'render_board_text',
]
