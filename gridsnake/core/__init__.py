"""
Core abstractions for gridsnake.

Provides the event emitter, the deferred-callback queue and the renderer
interface shared by the game models and their collaborators.
"""

from .event_emitter import EventEmitter
from .timers import TimerHandle, TimerQueue, monotonic_ms
from .renderer_interface import RendererInterface

__all__ = [
    'EventEmitter',
    'TimerHandle',
    'TimerQueue',
    'monotonic_ms',
    'RendererInterface',
]
