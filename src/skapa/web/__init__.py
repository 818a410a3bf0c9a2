"""REST API for skapa box generation.

Run with: uvicorn skapa.web.app:app
"""

from skapa.web.app import app, create_app

__all__ = ["app", "create_app"]
