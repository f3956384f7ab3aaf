"""Python SDK for talking to a WebUI server."""

from .client import WebUIClient

__all__ = ["WebUIClient"]
