"""
Configuration management for the Swap Ingest webhook service.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for the service configuration.
"""

from swap_ingest.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
