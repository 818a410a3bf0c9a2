"""API errors and their JSON responses.

Every error body has the same shape, see `ErrorResponseSchema`:
`{"error": ..., "error_type": ..., "details": ...}`.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from skapa.application import BoxGenerationError
from skapa.application.config import ConfigError
from skapa.web.schemas.responses import ErrorResponseSchema


class SupersededRequestError(Exception):
    """A newer preview request arrived before this one was built."""

    def __init__(self) -> None:
        super().__init__("Preview request was superseded by a newer one")


class UnsupportedFormatError(Exception):
    """No exporter is registered for the requested format."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format '{format_name}'; use one of: {', '.join(available)}"
        )


def _error_response(
    status_code: int, error: str, error_type: str, details: Any = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


async def _generation_failed(request: Request, exc: BoxGenerationError) -> JSONResponse:
    return _error_response(
        422,
        "Box generation failed",
        "generation",
        [{"message": message} for message in exc.errors],
    )


async def _invalid_config(request: Request, exc: ConfigError) -> JSONResponse:
    details = [
        {"path": detail.get("path"), "message": detail.get("message")}
        for detail in exc.details
    ]
    return _error_response(422, "Invalid configuration", exc.error_type, details)


async def _unsupported_format(
    request: Request, exc: UnsupportedFormatError
) -> JSONResponse:
    return _error_response(
        400,
        str(exc),
        "unsupported_format",
        {"format": exc.format_name, "available": exc.available},
    )


async def _superseded(request: Request, exc: SupersededRequestError) -> JSONResponse:
    return _error_response(409, str(exc), "superseded")


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI `responses=` entries documenting the error body for each code."""
    return {code: {"model": ErrorResponseSchema} for code in status_codes}


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and configuration errors to JSON error responses."""
    app.add_exception_handler(BoxGenerationError, _generation_failed)
    app.add_exception_handler(ConfigError, _invalid_config)
    app.add_exception_handler(UnsupportedFormatError, _unsupported_format)
    app.add_exception_handler(SupersededRequestError, _superseded)
