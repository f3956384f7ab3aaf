"""Transport-agnostic protocol layer.

Defines the event/response shapes and the dispatcher that work
identically across the WebSocket and HTTP transports.

Key concepts:
- UIEvent: Browser -> server notification of a user interaction
- UIResponse: Server -> browser result of handling that event
- Correlation: WebSocket responses echo the event's correlation_token;
  HTTP responses never carry one
"""

from .events import KEY_SEPARATOR, UIEvent, binding_key
from .handler import EventDispatcher
from .responses import UIResponse

__all__ = [
    "KEY_SEPARATOR",
    "EventDispatcher",
    "UIEvent",
    "UIResponse",
    "binding_key",
]
