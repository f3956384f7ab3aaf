"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from web_ui import HandlerRegistry, UIEvent, UIResponse, WebUI, WebUIConfig


@pytest.fixture
def registry() -> HandlerRegistry:
    """Create a fresh registry for each test."""
    return HandlerRegistry()


@pytest.fixture
def webui(tmp_path) -> WebUI:
    """WebUI with a save button bound and an empty static directory."""
    ui = WebUI(WebUIConfig(title="Test UI", static_dir=str(tmp_path)))

    @ui.on("save-btn")
    def save(event: UIEvent) -> UIResponse:
        return UIResponse(succeeded=True, message="ok", payload={"n": 1})

    return ui


@pytest.fixture
def client(webui: WebUI) -> TestClient:
    """Test client for the WebUI app."""
    return TestClient(webui.create_app())
