"""Web UI - local web interfaces with real-time communication.

Register Python handlers for events raised by elements of a browser UI
and serve them over a WebSocket channel (/ws) with an HTTP fallback
(/api/event). Events are identified by element id and event type, for
example "button1:click".

Quick start:
    from web_ui import UIResponse, WebUI, WebUIConfig

    webui = WebUI(WebUIConfig(port=3030, title="My Web App"))

    @webui.on("my-button")
    def clicked(event):
        return UIResponse.ok("Button clicked!")

    webui.run()
"""

from .app import WebUI
from .config import WebUIConfig
from .errors import HandlerError, WebUIError
from .locks import ReadWriteLock
from .protocol import EventDispatcher, UIEvent, UIResponse, binding_key
from .registry import EventHandler, HandlerRegistry

__version__ = "0.1.1"

__all__ = [
    "EventDispatcher",
    "EventHandler",
    "HandlerError",
    "HandlerRegistry",
    "ReadWriteLock",
    "UIEvent",
    "UIResponse",
    "WebUI",
    "WebUIConfig",
    "WebUIError",
    "binding_key",
]
