"""Handler registry for UI events.

Maps a binding key ("element_id:event_type") to the callable that handles
it. One registry is shared by every WebSocket connection and every HTTP
call of a WebUI instance.

Usage:
    registry = HandlerRegistry()

    def on_save(event: UIEvent) -> UIResponse | str:
        if not event.data:
            return "nothing to save"
        return UIResponse.ok("saved")

    await registry.register("save-btn", "click", on_save)
    handler = await registry.lookup("save-btn", "click")
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .locks import ReadWriteLock
from .protocol.events import KEY_SEPARATOR, UIEvent, binding_key
from .protocol.responses import UIResponse

logger = logging.getLogger(__name__)

CLICK = "click"

# A handler receives the event and returns a UIResponse, or a string
# describing a failure. Async handlers return an awaitable of either.
HandlerOutcome = UIResponse | str
EventHandler = Callable[[UIEvent], HandlerOutcome | Awaitable[HandlerOutcome]]

# Zero-argument side effect bound with register_click
ClickAction = Callable[[], Any]


def click_handler(action: ClickAction) -> EventHandler:
    """Wrap a zero-argument action into an event handler.

    The action's return value is ignored; the handler always reports
    success with no message and no payload.
    """
    if not callable(action):
        raise ValueError("Click action must be callable")

    async def handler(event: UIEvent) -> UIResponse:
        result = action()
        if inspect.isawaitable(result):
            await result
        return UIResponse(succeeded=True)

    handler.__name__ = getattr(action, "__name__", "click_handler")
    handler.__qualname__ = getattr(action, "__qualname__", handler.__name__)
    return handler


class HandlerRegistry:
    """Concurrent table of event handlers.

    Lookups share the lock; registrations take it exclusively and hold it
    only for the insert itself. Registering an existing key replaces the
    previous handler.

    Handlers are never removed: a binding lives as long as the registry.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, EventHandler] = {}
        self._lock = ReadWriteLock()

    @property
    def lock(self) -> ReadWriteLock:
        """The lock guarding the handler table."""
        return self._lock

    async def register(self, element_id: str, event_type: str, handler: EventHandler) -> None:
        """Bind a handler to an element and event type.

        Args:
            element_id: The ID of the HTML element
            event_type: The event to handle (e.g., "click", "change")
            handler: Callable invoked with the UIEvent

        Raises:
            ValueError: If the handler is not callable or an id contains ":"
        """
        key = self._prepare(element_id, event_type, handler)
        async with self._lock.write():
            replaced = key in self._handlers
            self._handlers[key] = handler
        action = "Replaced" if replaced else "Registered"
        logger.info(f"{action} handler for {key}")

    def register_nowait(self, element_id: str, event_type: str, handler: EventHandler) -> None:
        """Bind a handler without awaiting the lock.

        Meant for setup code that runs before serving (decorators, module
        import). The insert does not yield to the event loop, so it cannot
        interleave with other registry operations on the same loop.

        Raises:
            RuntimeError: If the lock is currently held
        """
        key = self._prepare(element_id, event_type, handler)
        if self._lock.locked:
            raise RuntimeError(f"Registry is busy; await register() to bind {key}")
        replaced = key in self._handlers
        self._handlers[key] = handler
        action = "Replaced" if replaced else "Registered"
        logger.info(f"{action} handler for {key}")

    async def register_click(self, element_id: str, action: ClickAction) -> None:
        """Bind a zero-argument action to the element's click event."""
        await self.register(element_id, CLICK, click_handler(action))

    async def lookup(self, element_id: str, event_type: str) -> EventHandler | None:
        """Get the handler currently bound to the pair, or None."""
        return await self.lookup_key(f"{element_id}{KEY_SEPARATOR}{event_type}")

    async def lookup_key(self, key: str) -> EventHandler | None:
        """Get the handler bound to a binding key, or None."""
        async with self._lock.read():
            return self._handlers.get(key)

    def keys(self) -> list[str]:
        """Sorted binding keys of all registered handlers."""
        return sorted(self._handlers)

    @property
    def count(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    @staticmethod
    def _prepare(element_id: str, event_type: str, handler: EventHandler) -> str:
        if not callable(handler):
            raise ValueError("Event handler must be callable")
        return binding_key(element_id, event_type)
