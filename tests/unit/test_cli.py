"""Unit tests for the web-ui command line."""

from __future__ import annotations

import json
import sys
import types
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from web_ui import UIResponse, WebUI, WebUIConfig
from web_ui.cli import load_app, main
from web_ui.demo import DEMO_STATIC_DIR


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove WEBUI_* settings inherited from the environment."""
    for name in ("HOST", "PORT", "TITLE", "STATIC_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(f"WEBUI_{name}", raising=False)


@pytest.fixture
def fake_module(monkeypatch):
    """Importable module exposing a WebUI instance and a factory."""
    module = types.ModuleType("fake_ui_app")
    module.webui = WebUI(WebUIConfig(port=8080, static_dir="./public"))
    module.make = lambda: WebUI()
    module.not_ui = 42
    monkeypatch.setitem(sys.modules, "fake_ui_app", module)
    return module


class FakeClient:
    """Stands in for WebUIClient in CLI tests."""

    response = UIResponse.ok("ok")
    sent: list = []

    def __init__(self, base_url: str):
        self.base_url = base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None

    async def send_event(self, element_id, event_type, data=None):
        FakeClient.sent.append((self.base_url, element_id, event_type, data))
        return FakeClient.response

    async def health(self):
        return {"status": "ok"}


# =============================================================================
# load_app
# =============================================================================


class TestLoadApp:
    def test_loads_instance(self, fake_module):
        webui = load_app("fake_ui_app:webui")

        assert webui is fake_module.webui

    def test_calls_factory(self, fake_module):
        webui = load_app("fake_ui_app:make")

        assert isinstance(webui, WebUI)

    @pytest.mark.parametrize(
        "target",
        ["fake_ui_app", "fake_ui_app:missing", "fake_ui_app:not_ui", "no_such_module_xyz:app"],
    )
    def test_rejects_bad_targets(self, fake_module, target):
        with pytest.raises(click.BadParameter):
            load_app(target)


# =============================================================================
# serve
# =============================================================================


class TestServe:
    def test_serves_demo_by_default(self, runner, clean_env):
        with patch.object(WebUI, "run", autospec=True) as run:
            result = runner.invoke(main, ["serve", "--port", "8123"])

        assert result.exit_code == 0, result.output
        run.assert_called_once()
        served = run.call_args.args[0]
        assert served.config.static_dir == DEMO_STATIC_DIR
        assert served.config.port == 8123
        assert "Event Binding Demo" in result.output
        assert "http://127.0.0.1:8123" in result.output
        assert "count-btn:click" in result.output

    def test_serves_app_with_overrides(self, runner, fake_module, clean_env):
        with patch.object(WebUI, "run"):
            result = runner.invoke(
                main,
                ["serve", "--app", "fake_ui_app:webui", "--host", "0.0.0.0", "--title", "Mine"],
            )

        assert result.exit_code == 0, result.output
        assert fake_module.webui.config.host == "0.0.0.0"
        assert fake_module.webui.config.title == "Mine"
        assert fake_module.webui.config.port == 8080
        assert fake_module.webui.config.static_dir == "./public"

    def test_keeps_app_config_without_overrides(self, runner, fake_module, clean_env):
        with patch.object(WebUI, "run"):
            result = runner.invoke(main, ["serve", "--app", "fake_ui_app:webui"])

        assert result.exit_code == 0, result.output
        assert fake_module.webui.config.port == 8080
        assert fake_module.webui.config.static_dir == "./public"
        assert "http://127.0.0.1:8080" in result.output

    def test_environment_config(self, runner, fake_module, clean_env, monkeypatch):
        monkeypatch.setenv("WEBUI_PORT", "9001")
        with patch.object(WebUI, "run"):
            result = runner.invoke(main, ["serve", "--app", "fake_ui_app:webui"])

        assert result.exit_code == 0, result.output
        assert fake_module.webui.config.port == 9001
        assert fake_module.webui.config.static_dir == "./public"

    def test_invalid_port(self, runner, clean_env):
        result = runner.invoke(main, ["serve", "--port", "70000"])

        assert result.exit_code == 2
        assert "Port" in result.output

    def test_invalid_environment_port(self, runner, clean_env, monkeypatch):
        monkeypatch.setenv("WEBUI_PORT", "http")

        result = runner.invoke(main, ["serve"])

        assert result.exit_code == 2
        assert "WEBUI_PORT" in result.output


# =============================================================================
# send / health
# =============================================================================


class TestSend:
    def test_prints_result(self, runner, monkeypatch):
        FakeClient.sent = []
        FakeClient.response = UIResponse.ok("ok", {"n": 1})
        monkeypatch.setattr("web_ui.cli.WebUIClient", FakeClient)

        result = runner.invoke(
            main, ["send", "save-btn", "click", "--data", '{"a": 1}', "--url", "http://x:1"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"succeeded": True, "message": "ok", "payload": {"n": 1}}
        assert FakeClient.sent == [("http://x:1", "save-btn", "click", {"a": 1})]

    def test_failure_exit_code(self, runner, monkeypatch):
        FakeClient.response = UIResponse.failure("no handler for ghost:click")
        monkeypatch.setattr("web_ui.cli.WebUIClient", FakeClient)

        result = runner.invoke(main, ["send", "ghost", "click"])

        assert result.exit_code == 1
        assert "no handler for ghost:click" in result.output

    def test_rejects_invalid_data(self, runner):
        result = runner.invoke(main, ["send", "b", "click", "--data", "{nope"])

        assert result.exit_code == 2


class TestHealth:
    def test_healthy(self, runner, monkeypatch):
        monkeypatch.setattr("web_ui.cli.WebUIClient", FakeClient)

        result = runner.invoke(main, ["health"])

        assert result.exit_code == 0
        assert "Server is healthy" in result.output

    def test_unreachable(self, runner):
        result = runner.invoke(main, ["health", "--url", "http://127.0.0.1:9"])

        assert result.exit_code == 1
