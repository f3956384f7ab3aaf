"""Server configuration.

Values can come from code, from WEBUI_* environment variables, or from
the CLI. The CLI applies set variables and given options field by field
over the served app's own config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3030
DEFAULT_TITLE = "Web UI"
DEFAULT_STATIC_DIR = "./static"


@dataclass
class WebUIConfig:
    """Configuration for the WebUI server.

    Attributes:
        host: Interface to bind to
        port: Port to bind to (1-65535)
        title: Application title, reported by /health
        static_dir: Directory served at / for the frontend files
        log_level: Log level used by the CLI and uvicorn
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    title: str = DEFAULT_TITLE
    static_dir: str = DEFAULT_STATIC_DIR
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")

    @property
    def address(self) -> str:
        """Base URL the server listens on."""
        return f"http://{self.host}:{self.port}"

    @staticmethod
    def env_overrides(prefix: str = "WEBUI_") -> dict[str, Any]:
        """Fields set through environment variables, keyed by field name.

        Reads {prefix}HOST, {prefix}PORT, {prefix}TITLE, {prefix}STATIC_DIR
        and {prefix}LOG_LEVEL. Unset variables are left out, so the result
        can be applied on top of an existing config with dataclasses.replace.

        Raises:
            ValueError: If the port is not an integer
        """
        overrides: dict[str, Any] = {}
        for name in ("host", "title", "static_dir"):
            value = os.environ.get(f"{prefix}{name.upper()}")
            if value is not None:
                overrides[name] = value

        port = os.environ.get(f"{prefix}PORT")
        if port:
            try:
                overrides["port"] = int(port)
            except ValueError:
                raise ValueError(f"{prefix}PORT must be an integer, got {port!r}") from None

        log_level = os.environ.get(f"{prefix}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.lower()
        return overrides

    @classmethod
    def from_env(cls, prefix: str = "WEBUI_") -> WebUIConfig:
        """Build a config from environment variables over the defaults.

        Raises:
            ValueError: If the port is not an integer in range
        """
        return cls(**cls.env_overrides(prefix))
