"""Route definitions for the web_ui application."""

from .events import event_routes
from .health import health_routes
from .websocket import websocket_routes

__all__ = [
    "event_routes",
    "health_routes",
    "websocket_routes",
]
