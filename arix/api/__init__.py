"""FastAPI endpoints for the Arix chat server.

Endpoints:
    - GET /health: Service health status
    - POST /documents/extract: Plain-text extraction from an uploaded PDF

The chat page itself is served by NiceGUI, mounted on the same app.
"""

from arix.api.app import app, create_app

__all__ = ["app", "create_app"]
