"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class BoxDimensionsSchema(BaseModel):
    """Outer dimensions and thicknesses used for the build."""

    height: float = Field(..., description="Outer height in mm")
    width: float = Field(..., description="Outer width in mm")
    depth: float = Field(..., description="Outer depth in mm")
    wall: float = Field(..., description="Wall thickness in mm")
    bottom: float = Field(..., description="Bottom thickness in mm")


class CornerRadiiSchema(BaseModel):
    """Corner radii after clamping."""

    front_left: float
    front_right: float
    back_left: float
    back_right: float


class OpenFrontSchema(BaseModel):
    """Front opening after clamping. Openness is a fraction."""

    openness: float
    bottom_offset: float
    cutout_radius: float


class BoundingBoxSchema(BaseModel):
    min: list[float]
    max: list[float]


class MeshStatsSchema(BaseModel):
    """Statistics of the generated solid."""

    volume: float = Field(..., description="Volume in cubic mm")
    triangles: int
    vertices: int
    bounding_box: BoundingBoxSchema


class BoxOutputSchema(BaseModel):
    """Response for box generation."""

    is_valid: bool = Field(..., description="Whether generation was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    box: BoxDimensionsSchema | None = None
    corner_radii: CornerRadiiSchema | None = None
    open_front: OpenFrontSchema | None = None
    clip_pairs: int = Field(default=0, description="Number of clip pairs placed")
    mesh: MeshStatsSchema | None = None


class LimitsOutputSchema(BaseModel):
    """Valid parameter ranges for a box."""

    max_corner_radius: float
    max_bottom_offset: float
    max_cutout_radius: float = Field(
        ..., description="Bound at the reported openness and bottom offset"
    )
    openness: float
    bottom_offset: float
    clip_columns: int
    clip_rows: int


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str] = Field(..., description="List of available format names")


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict] | dict | None = Field(default=None, description="Error details")
