"""Web UI CLI.

Usage:
    web-ui serve                               # Serve the bundled demo
    web-ui serve --app myapp.ui:webui          # Serve your own WebUI
    web-ui serve --port 8080 --static-dir ./public
    web-ui send count-btn click                # Post one event
    web-ui send greet-btn click --data '{"name-input": "Ada"}'
    web-ui health                              # Check server health
"""

from __future__ import annotations

import asyncio
import dataclasses
import importlib
import json
import logging
import sys
from typing import Any

import click
import httpx

from .app import WebUI
from .config import DEFAULT_HOST, DEFAULT_PORT, WebUIConfig
from .sdk.client import WebUIClient

DEFAULT_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"


def load_app(target: str) -> WebUI:
    """Load a WebUI from "module:attribute".

    The attribute may be a WebUI instance or a zero-argument factory
    returning one. Its config is left as the module built it.
    """
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise click.BadParameter(f"expected 'module:attribute', got {target!r}", param_hint="--app")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}", param_hint="--app") from e

    obj: Any = getattr(module, attr, None)
    if obj is None:
        raise click.BadParameter(f"{module_name} has no attribute {attr!r}", param_hint="--app")
    if not isinstance(obj, WebUI) and callable(obj):
        obj = obj()
    if not isinstance(obj, WebUI):
        raise click.BadParameter(f"{target} is not a WebUI", param_hint="--app")

    return obj


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
    show_default=True,
    help="Logging level",
)
@click.pass_context
def main(ctx: click.Context, log_level: str) -> None:
    """Web UI - local web interfaces backed by Python event handlers."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = {"log_level": log_level.lower()}


@main.command()
@click.option("--app", "app_path", help="WebUI to serve as module:attribute (default: demo)")
@click.option("--host", help="Host to bind to [env WEBUI_HOST]")
@click.option("--port", type=int, help="Port to bind to [env WEBUI_PORT]")
@click.option("--title", help="Application title [env WEBUI_TITLE]")
@click.option("--static-dir", help="Directory of frontend files [env WEBUI_STATIC_DIR]")
@click.pass_context
def serve(
    ctx: click.Context,
    app_path: str | None,
    host: str | None,
    port: int | None,
    title: str | None,
    static_dir: str | None,
) -> None:
    """Serve a WebUI until interrupted."""
    try:
        overrides = WebUIConfig.env_overrides()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    options = {"host": host, "port": port, "title": title, "static_dir": static_dir}
    overrides.update({k: v for k, v in options.items() if v is not None})
    overrides["log_level"] = ctx.obj["log_level"]

    if app_path:
        webui = load_app(app_path)
    else:
        from .demo import create_demo

        webui = create_demo()

    # Only settings given explicitly replace the app's own config
    try:
        webui.config = dataclasses.replace(webui.config, **overrides)
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    config = webui.config

    click.echo(f"Starting {config.title} on {config.address}", err=True)
    click.echo(f"Handlers: {', '.join(webui.registry.keys()) or '(none)'}", err=True)
    click.echo("Press Ctrl+C to stop", err=True)

    webui.run()


@main.command()
@click.argument("element_id")
@click.argument("event_type")
@click.option("--data", "data_json", default="null", help="Event data as JSON")
@click.option("--url", default=DEFAULT_URL, show_default=True, help="Server URL")
def send(element_id: str, event_type: str, data_json: str, url: str) -> None:
    """Send one event over HTTP and print the result."""
    try:
        data = json.loads(data_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--data") from e

    async def post() -> Any:
        async with WebUIClient(url) as client:
            return await client.send_event(element_id, event_type, data)

    try:
        response = asyncio.run(post())
    except httpx.HTTPError as e:
        click.echo(f"Request failed: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(response.to_dict(), indent=2))
    if not response.succeeded:
        sys.exit(1)


@main.command()
@click.option("--url", default=DEFAULT_URL, show_default=True, help="Server URL")
def health(url: str) -> None:
    """Check server health."""

    async def check() -> dict[str, Any]:
        async with WebUIClient(url) as client:
            return await client.health()

    try:
        data = asyncio.run(check())
    except httpx.HTTPError as e:
        click.echo(f"Cannot reach server at {url}: {e}", err=True)
        sys.exit(1)

    click.echo(f"Server is healthy: {data}")


if __name__ == "__main__":
    main()
