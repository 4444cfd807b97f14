"""
Main entrypoint: run the swap webhook server.

Env: WEBHOOK_HOST, WEBHOOK_PORT, LOG_LEVEL, LOG_FORMAT, CORS_ALLOW_ORIGINS
(also read from .env in the project root).

Equivalent: uvicorn swap_ingest.api_server.app:app --host 127.0.0.1 --port 3000
"""

from swap_ingest.config import get_settings
from swap_ingest.ingest_logging import configure_structlog, get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings, configure logging from them, then serve the app with uvicorn."""
    settings = get_settings()
    configure_structlog(settings.log_level, settings.log_format)

    from swap_ingest.api_server.app import app
    import uvicorn

    logger.info("webhook_started", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
