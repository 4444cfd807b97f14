"""
Structured logging: JSON lines keyed by event_type.

Every record carries an ISO timestamp, level, logger name and event_type, plus
whatever fields the call site passes (signature, slot, latency_sec, ...).
Loggers are lazy proxies, so configure_structlog() may run after modules have
called get_logger(); main() calls it once settings are loaded.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

DEFAULT_LEVEL = "info"
DEFAULT_FORMAT = "json"


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _event_to_event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def level_value(level: str) -> int:
    """Map a level name ("debug", "INFO", ...) to its logging constant; unknown names mean INFO."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_structlog(level: str = DEFAULT_LEVEL, fmt: str = DEFAULT_FORMAT) -> None:
    """
    (Re)configure structlog.

    Args:
        level: minimum level name; records below it are dropped.
        fmt: "json" for one JSON object per line, anything else for the
            human-readable console renderer.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
        _event_to_event_type,
    ]
    if fmt.strip().lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("webhook_transaction_accepted", signature=sig, slot=slot)
    """
    return structlog.get_logger(name, logger=name)


def bind_signature(signature: str) -> Any:
    """Logger with the transaction signature bound to every record."""
    return get_logger("swap_ingest").bind(signature=signature)
