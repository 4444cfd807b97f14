"""
Tests for config.settings.get_settings (env parsing and defaults).
"""

from __future__ import annotations

import pytest

from swap_ingest.config import get_settings

_ENV_KEYS = ("WEBHOOK_HOST", "WEBHOOK_PORT", "LOG_LEVEL", "LOG_FORMAT", "CORS_ALLOW_ORIGINS")


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("swap_ingest.config.settings.load_env", lambda: None)
    return monkeypatch


def test_defaults(clean_env):
    s = get_settings()
    assert s.host == "127.0.0.1"
    assert s.port == 3000
    assert s.log_level == "info"
    assert s.log_format == "json"
    assert s.cors_allow_origins == ("*",)


def test_env_overrides(clean_env):
    clean_env.setenv("WEBHOOK_HOST", "0.0.0.0")
    clean_env.setenv("WEBHOOK_PORT", "8080")
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    clean_env.setenv("LOG_FORMAT", "Console")
    clean_env.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")
    s = get_settings()
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.log_level == "debug"
    assert s.log_format == "console"
    assert s.cors_allow_origins == ("https://a.example", "https://b.example")


@pytest.mark.parametrize("port", ["abc", "0", "70000", "-1"])
def test_invalid_port(clean_env, port):
    clean_env.setenv("WEBHOOK_PORT", port)
    with pytest.raises(ValueError, match="WEBHOOK_PORT"):
        get_settings()


def test_dotenv_values_reach_settings(clean_env, tmp_path):
    """LOG_LEVEL / LOG_FORMAT from a .env file end up in Settings."""
    from dotenv import load_dotenv

    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=warning\nLOG_FORMAT=console\n", encoding="utf-8")
    clean_env.setattr("swap_ingest.config.settings.load_env", lambda: load_dotenv(env_file))
    s = get_settings()
    assert s.log_level == "warning"
    assert s.log_format == "console"
