"""
Structured logging for Swap Ingest.

JSON logs with timestamp, event_type and per-event fields (signature, slot, ...).
Use get_logger() in all modules for aggregation-friendly output.
"""

from swap_ingest.ingest_logging.logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
