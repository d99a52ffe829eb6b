"""
gridsnake - a tick-driven grid snake simulation.

The game models publish events and render snapshots; rendering, input,
audio and storage live outside the core and talk to it only through those.
"""

__version__ = "1.0.0"
