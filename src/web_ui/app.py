"""WebUI application.

Creates the Starlette ASGI application and serves it with uvicorn.

Route organization:
- /health - Health check
- /api/event - One event per HTTP POST
- /ws - WebSocket event channel
- / - Static frontend files (when the static directory exists)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import BaseRoute, Mount
from starlette.staticfiles import StaticFiles

from .config import WebUIConfig
from .protocol.handler import EventDispatcher
from .registry import CLICK, ClickAction, EventHandler, HandlerRegistry, click_handler
from .routes import event_routes, health_routes, websocket_routes

logger = logging.getLogger(__name__)


class WebUI:
    """A local web interface backed by Python event handlers.

    The instance owns one handler registry. Every WebSocket connection and
    HTTP call made against its app resolves handlers in that registry.

    Example:
        webui = WebUI(WebUIConfig(port=3030, title="My App"))

        await webui.bind_click("hello-btn", lambda: print("Hello!"))

        @webui.on("form1", "submit")
        def submit(event: UIEvent) -> UIResponse:
            return UIResponse.ok("Form processed", {"result": "ok"})

        await webui.serve()
    """

    def __init__(
        self,
        config: WebUIConfig | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self.config = config or WebUIConfig()
        self.registry = registry or HandlerRegistry()
        self.dispatcher = EventDispatcher(self.registry)

    async def bind_event(self, element_id: str, event_type: str, handler: EventHandler) -> None:
        """Register a handler for a specific element and event type.

        The handler receives the UIEvent and returns a UIResponse, or a
        string describing a failure. Binding the same pair again replaces
        the earlier handler.
        """
        await self.registry.register(element_id, event_type, handler)

    async def bind_click(self, element_id: str, action: ClickAction) -> None:
        """Register a click action that takes no arguments and returns nothing."""
        await self.registry.register_click(element_id, action)

    def on(self, element_id: str, event_type: str = CLICK) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of bind_event for use before serving.

        Example:
            @webui.on("name-input", "change")
            def name_changed(event: UIEvent) -> UIResponse:
                return UIResponse.ok(f"Name updated to: {event.data['value']}")
        """

        def decorator(func: EventHandler) -> EventHandler:
            self.registry.register_nowait(element_id, event_type, func)
            return func

        return decorator

    def on_click(self, element_id: str) -> Callable[[ClickAction], ClickAction]:
        """Decorator form of bind_click for use before serving.

        The decorated function takes no arguments; the result is always a
        bare success.
        """

        def decorator(action: ClickAction) -> ClickAction:
            self.registry.register_nowait(element_id, CLICK, click_handler(action))
            return action

        return decorator

    def create_app(self) -> Starlette:
        """Create the ASGI application.

        Returns:
            Configured Starlette application
        """
        routes: list[BaseRoute] = []
        routes.extend(health_routes)
        routes.extend(event_routes)
        routes.extend(websocket_routes)

        static_dir = Path(self.config.static_dir)
        if static_dir.is_dir():
            routes.append(Mount("/", app=StaticFiles(directory=static_dir, html=True), name="static"))
        else:
            logger.warning(f"Static directory {static_dir} not found; serving API routes only")

        # CORS middleware for local development
        middleware = [
            Middleware(
                CORSMiddleware,
                allow_origins=["http://localhost", "http://127.0.0.1"],
                allow_origin_regex=r"http://(localhost|127\.0\.0\.1):\d+",
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ]

        app = Starlette(routes=routes, middleware=middleware)
        app.state.config = self.config
        app.state.registry = self.registry
        app.state.dispatcher = self.dispatcher
        return app

    async def serve(self) -> None:
        """Bind to the configured address and serve until shutdown.

        A bind failure is fatal: uvicorn logs it and exits, and the
        resulting SystemExit propagates to the caller.
        """
        logger.info(f"Starting {self.config.title} on {self.config.address}")
        server = uvicorn.Server(
            uvicorn.Config(
                self.create_app(),
                host=self.config.host,
                port=self.config.port,
                log_level=self.config.log_level,
            )
        )
        await server.serve()

    def run(self) -> None:
        """Synchronous wrapper around serve()."""
        asyncio.run(self.serve())
