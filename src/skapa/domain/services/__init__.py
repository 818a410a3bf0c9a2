"""Domain services: cross-section builders, contour warp, limits and assembly."""

from .arc import generate_arc
from .assembler import BoxAssembler, box
from .clip_layout import ClipGrid, ClipLayoutService
from .clip_profile import CLIP_PROFILE, clip_cross_section, clips
from .contour_warp import MIN_LOCAL_RADIUS, ContourWarpMapper, CornerBend
from .front_cutout import (
    CutoutProfile,
    clamp_cutout_radius,
    front_cutout,
    front_cutout_cross_section,
    front_cutout_points,
    needs_warp,
    resolve_cutout_profile,
)
from .limits import CUTOUT_CLEARANCE, GeometricLimitCalculator
from .rounded_rectangle import rounded_rectangle, rounded_rectangle_points

__all__ = [
    "BoxAssembler",
    "CLIP_PROFILE",
    "CUTOUT_CLEARANCE",
    "ClipGrid",
    "ClipLayoutService",
    "ContourWarpMapper",
    "CornerBend",
    "CutoutProfile",
    "GeometricLimitCalculator",
    "MIN_LOCAL_RADIUS",
    "box",
    "clamp_cutout_radius",
    "clip_cross_section",
    "clips",
    "front_cutout",
    "front_cutout_cross_section",
    "front_cutout_points",
    "generate_arc",
    "needs_warp",
    "resolve_cutout_profile",
    "rounded_rectangle",
    "rounded_rectangle_points",
]
