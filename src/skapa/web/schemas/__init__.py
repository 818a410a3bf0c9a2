"""Pydantic schemas for the REST API."""

from skapa.web.schemas.requests import BoxRequest, GenerateFromConfigRequest
from skapa.web.schemas.responses import (
    BoundingBoxSchema,
    BoxDimensionsSchema,
    BoxOutputSchema,
    CornerRadiiSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LimitsOutputSchema,
    MeshStatsSchema,
    OpenFrontSchema,
)

__all__ = [
    # Requests
    "BoxRequest",
    "GenerateFromConfigRequest",
    # Responses
    "BoundingBoxSchema",
    "BoxDimensionsSchema",
    "BoxOutputSchema",
    "CornerRadiiSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LimitsOutputSchema",
    "MeshStatsSchema",
    "OpenFrontSchema",
]
