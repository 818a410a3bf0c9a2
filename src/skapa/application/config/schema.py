"""Pydantic models for box configuration files.

A configuration describes one box. Dimensions are outer dimensions in
millimetres unless `dimensions_are_inner` is set, in which case width and
depth are measured inside the walls (the way the interactive designer shows
them) and converted on load.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skapa.domain import height_for_levels

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Output formats for generated boxes."""

    STL = "stl"
    JSON = "json"


class CornerRadiiConfig(BaseModel):
    """Per-corner radii. Unset corners fall back to `BoxConfig.radius`."""

    model_config = ConfigDict(extra="forbid")

    front_left: float | None = Field(default=None, ge=0)
    front_right: float | None = Field(default=None, ge=0)
    back_left: float | None = Field(default=None, ge=0)
    back_right: float | None = Field(default=None, ge=0)


class BoxConfig(BaseModel):
    """Box dimensions and wall thicknesses.

    Exactly one of `height` and `levels` should be given; with `levels` the
    height is derived from the number of clip rows.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=204)
    depth: float = Field(..., gt=0, le=204)
    height: float | None = Field(default=None, gt=0, le=400)
    levels: int | None = Field(default=None, ge=1, le=5)
    radius: float = Field(default=6.0, ge=0, le=20)
    corners: CornerRadiiConfig | None = None
    wall: float = Field(default=2.0, gt=0, le=10)
    bottom: float = Field(default=3.0, gt=0, le=10)
    dimensions_are_inner: bool = False

    @model_validator(mode="after")
    def check_height_source(self) -> "BoxConfig":
        if self.height is None and self.levels is None:
            raise ValueError("Either height or levels must be specified")
        if self.height is not None and self.levels is not None:
            raise ValueError("Specify height or levels, not both")
        return self

    @property
    def outer_height(self) -> float:
        if self.height is not None:
            return self.height
        return height_for_levels(self.levels or 1)

    @property
    def outer_width(self) -> float:
        return self.width + 2 * self.wall if self.dimensions_are_inner else self.width

    @property
    def outer_depth(self) -> float:
        return self.depth + 2 * self.wall if self.dimensions_are_inner else self.depth

    def corner_radius(self, corner: str) -> float:
        value = getattr(self.corners, corner) if self.corners is not None else None
        return self.radius if value is None else value


class OpenFrontConfig(BaseModel):
    """Front opening. Openness is a percentage, as in the designer."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    # Outside 5-100 the value is clamped when the box is generated.
    openness: float = Field(default=50.0, gt=0)
    bottom_offset: float = Field(default=10.0, ge=0)
    cutout_radius: float = Field(default=6.0, ge=0)


class ClipsConfig(BaseModel):
    """Mounting clip placement."""

    model_config = ConfigDict(extra="forbid")

    corner_clips_only: bool = True


class OutputConfig(BaseModel):
    """Where and how to write the generated box."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.STL
    file: str | None = None


class BoxConfiguration(BaseModel):
    """Root model of a box configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    box: BoxConfig
    open_front: OpenFrontConfig | None = None
    clips: ClipsConfig = Field(default_factory=ClipsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @model_validator(mode="after")
    def check_version(self) -> "BoxConfiguration":
        if self.schema_version not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema_version '{self.schema_version}' "
                f"(supported: {supported})"
            )
        return self
