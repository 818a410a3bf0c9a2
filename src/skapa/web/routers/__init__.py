"""API routers for the REST API."""

from skapa.web.routers.export import router as export_router
from skapa.web.routers.generate import router as generate_router
from skapa.web.routers.limits import router as limits_router

__all__ = [
    "export_router",
    "generate_router",
    "limits_router",
]
