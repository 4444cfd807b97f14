"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn swap_ingest.api_server.app:app --host 127.0.0.1 --port 3000
"""

from swap_ingest.api_server.server import app

__all__ = ["app"]
