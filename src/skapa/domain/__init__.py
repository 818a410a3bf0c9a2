"""Domain layer - box geometry and solid assembly."""

from .kernel import SolidKernel, open_kernel
from .services import (
    BoxAssembler,
    ClipGrid,
    ClipLayoutService,
    ContourWarpMapper,
    GeometricLimitCalculator,
    box,
)
from .value_objects import (
    ARC_SEGMENTS,
    BOOLEAN_OVERSHOOT,
    CLIP_HEIGHT,
    CLIP_PITCH,
    MIN_OPENNESS,
    BoxParameters,
    ClipPlacement,
    ContourRegion,
    CornerRadii,
    OpenFrontParams,
    SideContour,
    height_for_levels,
)

__all__ = [
    "ARC_SEGMENTS",
    "BOOLEAN_OVERSHOOT",
    "BoxAssembler",
    "BoxParameters",
    "CLIP_HEIGHT",
    "CLIP_PITCH",
    "ClipGrid",
    "ClipLayoutService",
    "ClipPlacement",
    "ContourRegion",
    "ContourWarpMapper",
    "CornerRadii",
    "GeometricLimitCalculator",
    "MIN_OPENNESS",
    "OpenFrontParams",
    "SideContour",
    "SolidKernel",
    "box",
    "height_for_levels",
    "open_kernel",
]
