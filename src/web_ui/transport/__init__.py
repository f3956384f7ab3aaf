"""Transport layer.

- WebSocket - the duplex channel, one connection per browser tab

The HTTP request/response channel needs no transport object of its own;
see web_ui.routes.events.
"""

from .websocket import WebSocketServerTransport

__all__ = [
    "WebSocketServerTransport",
]
