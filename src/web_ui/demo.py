"""Event binding demo.

Served by `web-ui serve` when no --app is given. Shows a plain click
action, a handler with shared state, a handler reading event data and a
change handler.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

from .app import WebUI
from .config import WebUIConfig
from .protocol.events import UIEvent
from .protocol.responses import UIResponse

logger = logging.getLogger(__name__)

# Browser client and pages bundled with the package
DEMO_STATIC_DIR = str(Path(__file__).parent / "static" / "event_binding")
DEMO_TITLE = "Event Binding Demo"


def create_demo(config: WebUIConfig | None = None) -> WebUI:
    """Build the demo application with its handlers bound."""
    webui = WebUI(config or WebUIConfig(title=DEMO_TITLE, static_dir=DEMO_STATIC_DIR))
    clicks = itertools.count(1)

    @webui.on_click("hello-btn")
    def hello() -> None:
        logger.info("Hello button was clicked!")

    @webui.on("count-btn")
    def count(event: UIEvent) -> UIResponse:
        n = next(clicks)
        logger.info(f"Count button clicked {n} times")
        return UIResponse.ok(f"Button clicked {n} times", {"count": n})

    @webui.on("greet-btn")
    def greet(event: UIEvent) -> UIResponse:
        data = event.data if isinstance(event.data, dict) else {}
        if "name-input" in data:
            name = data["name-input"] if isinstance(data["name-input"], str) else "Anonymous"
        else:
            name = "Friend"
        return UIResponse.ok(
            f"Hello, {name}! Nice to meet you.",
            {"greeting_sent": True, "name": name},
        )

    @webui.on("name-input", "change")
    def name_changed(event: UIEvent) -> UIResponse:
        data = event.data if isinstance(event.data, dict) else {}
        value = data.get("value")
        if isinstance(value, str):
            return UIResponse.ok(f"Name updated to: {value}")
        return UIResponse.ok("Name input changed")

    return webui
