from __future__ import annotations

import json
import logging

from techsvg.config.settings import Settings, get_settings
from techsvg.generator import generate_svg
from techsvg.utils.logging import JsonLogFormatter


def test_defaults(monkeypatch):
    for var in ("TECHSVG_MCP_TRANSPORT", "MCP_TRANSPORT", "TECHSVG_DEFAULT_THEME"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_theme == "github-dark"
    assert settings.mcp_transport == "stdio"
    assert settings.mcp_port == 8000
    assert settings.json_logs is False


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("TECHSVG_DEFAULT_THEME", "nord")
    monkeypatch.setenv("TECHSVG_JSON_LOGS", "true")
    settings = Settings(_env_file=None)
    assert settings.default_theme == "nord"
    assert settings.json_logs is True


def test_unprefixed_mcp_aliases(monkeypatch):
    monkeypatch.delenv("TECHSVG_MCP_TRANSPORT", raising=False)
    monkeypatch.setenv("MCP_TRANSPORT", "sse")
    monkeypatch.setenv("MCP_PORT", "9100")
    settings = Settings(_env_file=None)
    assert settings.mcp_transport == "sse"
    assert settings.mcp_port == 9100


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()


def test_json_log_formatter_emits_known_context():
    record = logging.LogRecord("techsvg.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.scene = "database"
    record.width = 700
    record.request_id = "abc"
    payload = json.loads(JsonLogFormatter().format(record))
    assert payload == {
        "level": "INFO",
        "logger": "techsvg.test",
        "message": "hello world",
        "scene": "database",
        "width": 700,
    }


def test_generate_svg_logs_scene_context(caplog):
    caplog.set_level(logging.DEBUG, logger="techsvg.generator")
    generate_svg("Postgres Schema Migration")
    record = next(r for r in caplog.records if r.name == "techsvg.generator")
    assert (record.scene, record.width, record.height) == ("database", 700, 420)
