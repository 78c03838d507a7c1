"""
FastAPI/ASGI application entrypoint.

Build and configure the ASGI app; mount routes from server.
Run with: uvicorn backend_brbrbr.api_server.app:app --host 127.0.0.1 --port 8080
"""

from backend_brbrbr.api_server.server import app

__all__ = ["app"]
