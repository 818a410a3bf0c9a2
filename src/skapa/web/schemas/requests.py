"""Pydantic request schemas for the REST API.

Request bodies reuse the configuration-file models, so a box posted to the
API is validated exactly like one loaded from disk.
"""

from typing import Any

from pydantic import BaseModel, Field

from skapa.application.config import (
    BoxConfig,
    BoxConfiguration,
    ClipsConfig,
    OpenFrontConfig,
)


class BoxRequest(BaseModel):
    """Request describing one box."""

    box: BoxConfig = Field(..., description="Box dimensions and corner radii")
    open_front: OpenFrontConfig | None = Field(
        default=None, description="Front opening; omit for a closed box"
    )
    clips: ClipsConfig = Field(
        default_factory=ClipsConfig, description="Mounting clip placement"
    )

    def to_configuration(self) -> BoxConfiguration:
        return BoxConfiguration(
            box=self.box,
            open_front=self.open_front,
            clips=self.clips,
        )


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a box from a full configuration document."""

    config: dict[str, Any] = Field(..., description="Full box configuration JSON")
