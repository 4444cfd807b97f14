"""
Application settings and environment configuration.

- WEBHOOK_HOST: bind address for the webhook server (default: 127.0.0.1)
- WEBHOOK_PORT: bind port (default: 3000)
- LOG_LEVEL: uvicorn / structlog level name (default: info)
- LOG_FORMAT: "json" for JSON log lines, anything else for console output (default: json)
- CORS_ALLOW_ORIGINS: comma-separated origins allowed by CORS (default: *)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is swap_ingest/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Resolved service settings."""

    host: str
    port: int
    log_level: str
    log_format: str
    cors_allow_origins: tuple[str, ...]


def load_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    load_dotenv(_ENV_PATH)


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ValueError(f"WEBHOOK_PORT must be an integer, got {raw!r}") from e
    if not (0 < port < 65536):
        raise ValueError(f"WEBHOOK_PORT out of range: {port}")
    return port


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def get_settings() -> Settings:
    """
    Return the current application settings.

    Raises:
        ValueError: if WEBHOOK_PORT is not a valid TCP port.
    """
    load_env()
    host = (os.getenv("WEBHOOK_HOST") or "").strip() or DEFAULT_HOST
    port = _parse_port((os.getenv("WEBHOOK_PORT") or "").strip() or str(DEFAULT_PORT))
    log_level = (os.getenv("LOG_LEVEL") or "info").strip().lower() or "info"
    log_format = (os.getenv("LOG_FORMAT") or "json").strip().lower() or "json"
    origins = _parse_origins(os.getenv("CORS_ALLOW_ORIGINS") or "*")
    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        log_format=log_format,
        cors_allow_origins=origins,
    )
