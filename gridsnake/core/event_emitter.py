"""
Event emitter - synchronous publish/subscribe for the simulation core.

Models notify renderers, audio and input collaborators through named events
without importing them.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]
ErrorHandler = Callable[[str, BaseException], None]


class EventEmitter:
    """
    Named-event publish/subscribe primitive.

    Listeners for an event fire in subscription order. Each emit iterates
    over a snapshot of the listener list, so listeners may subscribe or
    unsubscribe (themselves or others) without affecting the current pass.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the emitter.

        Args:
            error_handler: Called with (event, exception) when a listener
                raises. Defaults to logging the traceback.
        """
        self._events: Dict[str, List[Listener]] = {}
        self._error_handler = error_handler or self._log_listener_error

    def on(self, event: str, listener: Listener) -> Callable[[], None]:
        """
        Subscribe a listener to an event.

        Args:
            event: Event name
            listener: Callback invoked with the emitted arguments

        Returns:
            Zero-argument function that removes this subscription
        """
        self._events.setdefault(event, []).append(listener)
        return lambda: self.off(event, listener)

    def once(self, event: str, listener: Listener) -> Callable[[], None]:
        """Subscribe a listener that is removed after its first call."""

        def wrapper(*args, **kwargs):
            self.off(event, wrapper)
            return listener(*args, **kwargs)

        wrapper.listener = listener  # type: ignore[attr-defined]
        return self.on(event, wrapper)

    def off(self, event: str, listener: Listener) -> None:
        """
        Remove a listener from an event.

        Also matches listeners registered through once() when given the
        original callback.
        """
        listeners = self._events.get(event)
        if not listeners:
            return

        for i, registered in enumerate(listeners):
            if registered == listener or getattr(registered, "listener", None) == listener:
                del listeners[i]
                break

        if not listeners:
            del self._events[event]

    def emit(self, event: str, *args, **kwargs) -> bool:
        """
        Call every listener of an event.

        Args:
            event: Event name
            *args, **kwargs: Passed through to each listener

        Returns:
            True if the event had at least one listener
        """
        listeners = self._events.get(event)
        if not listeners:
            return False

        for listener in list(listeners):
            try:
                listener(*args, **kwargs)
            except Exception as exc:
                self._error_handler(event, exc)

        return True

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        """Remove the listeners of one event, or of every event when omitted."""
        if event is None:
            self._events.clear()
        else:
            self._events.pop(event, None)

    def listener_count(self, event: str) -> int:
        """Number of listeners currently subscribed to an event."""
        return len(self._events.get(event, ()))

    def event_names(self) -> List[str]:
        """Names of all events with at least one listener."""
        return list(self._events.keys())

    @staticmethod
    def _log_listener_error(event: str, exc: BaseException) -> None:
        logger.error("Error in listener for '%s'", event, exc_info=exc)
