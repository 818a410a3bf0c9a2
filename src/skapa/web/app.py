"""FastAPI application factory."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skapa import __version__
from skapa.web.exceptions import register_exception_handlers
from skapa.web.routers import export_router, generate_router, limits_router

API_PREFIX = "/api/v1"


def create_app(allowed_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the box generator API.

    Args:
        allowed_origins: Origins allowed to call the API from a browser,
            e.g. the designer page.
    """
    app = FastAPI(
        title="Skapa Box Generator API",
        description="Generate 3D-printable wall-mount storage boxes as STL",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )
    register_exception_handlers(app)

    for router in (generate_router, limits_router, export_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
