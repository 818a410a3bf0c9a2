"""Front finger-access cutout.

The opening is drawn flat, in unwrapped contour coordinates: X is the
distance along the box perimeter from the centre of the front face, Y is the
height. The flat profile is extruded through the front wall and, when it is
wide enough to reach the rounded corners, bent around them by
`ContourWarpMapper`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from manifold3d import CrossSection, Manifold

from ..kernel import SolidKernel
from ..value_objects import (
    BOOLEAN_OVERSHOOT,
    BoxParameters,
    CornerRadii,
    OpenFrontParams,
    Point2D,
    Side,
    SideContour,
)
from .arc import generate_arc
from .contour_warp import ContourWarpMapper

logger = logging.getLogger(__name__)

# Maximum edge length of the cutout mesh before it is bent.
WARP_REFINE_LENGTH = 2.0


@dataclass(frozen=True)
class CutoutProfile:
    """Resolved dimensions of the opening, in contour coordinates."""

    left_extent: float
    right_extent: float
    bottom: float
    top: float
    radius: float
    top_radius_left: float
    top_radius_right: float

    def extent(self, side: Side) -> float:
        return self.left_extent if side == "left" else self.right_extent

    def top_radius(self, side: Side) -> float:
        return self.top_radius_left if side == "left" else self.top_radius_right

    def reach(self, side: Side) -> float:
        """Furthest contour distance touched on a side, top flare included."""
        return self.extent(side) + self.top_radius(side)


def clamp_cutout_radius(
    cutout_radius: float, left_extent: float, right_extent: float, bottom: float, top: float
) -> float:
    """Largest bottom-corner radius that fits the opening."""
    return min(cutout_radius, left_extent, right_extent, (top - bottom) / 2)


def resolve_cutout_profile(
    box: BoxParameters, radii: CornerRadii, open_front: OpenFrontParams
) -> CutoutProfile:
    """Work out the opening's extents and radii from the user parameters.

    The extent on each side is `openness` times the perimeter length from the
    front centre to the start of the back flat. The top flare uses the
    bottom-corner radius, shortened so the flared edge stays within the
    perimeter plus the side's back-flat allowance.
    """
    bottom = box.bottom + open_front.bottom_offset
    top = box.height

    extents: dict[Side, float] = {}
    limits: dict[Side, float] = {}
    for side in ("left", "right"):
        contour = SideContour.of(box, radii, side)
        max_half = contour.max_half_extent()
        extents[side] = open_front.openness * max_half
        limits[side] = max_half + open_front.back_flat_allowance(side)

    radius = clamp_cutout_radius(
        open_front.cutout_radius, extents["left"], extents["right"], bottom, top
    )
    top_radii = {
        side: max(0.0, min(radius, limits[side] - extents[side]))
        for side in ("left", "right")
    }

    return CutoutProfile(
        left_extent=extents["left"],
        right_extent=extents["right"],
        bottom=bottom,
        top=top,
        radius=radius,
        top_radius_left=top_radii["left"],
        top_radius_right=top_radii["right"],
    )


def front_cutout_points(profile: CutoutProfile) -> list[Point2D]:
    """CCW outline of the U-shaped opening.

    Bottom corners curve inwards. The top corners flare outwards with a
    concave fillet when the side's top radius is positive, otherwise the
    sides rise straight. Either way the outline continues past the rim by
    the boolean overshoot.
    """
    left = profile.left_extent
    right = profile.right_extent
    bot = profile.bottom
    top = profile.top
    r = profile.radius
    chimney = top + BOOLEAN_OVERSHOOT

    if r <= 0:
        return [(-left, bot), (right, bot), (right, chimney), (-left, chimney)]

    points: list[Point2D] = []
    points += generate_arc(
        center=(-left + r, bot + r),
        radius=r,
        start_angle=math.pi,
        end_angle=3 * math.pi / 2,
    )
    points += generate_arc(
        center=(right - r, bot + r),
        radius=r,
        start_angle=3 * math.pi / 2,
        end_angle=2 * math.pi,
    )

    top_right = profile.top_radius_right
    if top_right > 0:
        points += generate_arc(
            center=(right + top_right, top - top_right),
            radius=top_right,
            start_angle=math.pi,
            end_angle=math.pi / 2,
        )
    points.append((right + top_right, chimney))

    top_left = profile.top_radius_left
    points.append((-left - top_left, chimney))
    if top_left > 0:
        points += generate_arc(
            center=(-left - top_left, top - top_left),
            radius=top_left,
            start_angle=math.pi / 2,
            end_angle=0.0,
        )

    return points


def front_cutout_cross_section(kernel: SolidKernel, profile: CutoutProfile) -> CrossSection:
    return kernel.cross_section(front_cutout_points(profile))


def needs_warp(profile: CutoutProfile, mapper: ContourWarpMapper) -> bool:
    """Whether the opening reaches past the flat front on either side."""
    return any(
        profile.reach(side) > mapper.contour(side).flat_bound for side in ("left", "right")
    )


def front_cutout(
    kernel: SolidKernel,
    box: BoxParameters,
    radii: CornerRadii,
    open_front: OpenFrontParams,
) -> Manifold:
    """Solid to subtract from the box to open its front.

    The flat profile is extruded through the front wall (along -Y, from
    outside the front face to just inside the wall) and bent around the
    corners when it reaches them. A bent cutout starts further out, so it
    still covers corners tighter than the bend.

    Args:
        kernel: Kernel handle.
        box: Box dimensions.
        radii: Corner radii of the outer shell.
        open_front: Opening parameters, with back-flat allowances filled in.

    Returns:
        The cutout solid.
    """
    profile = resolve_cutout_profile(box, radii, open_front)
    mapper = ContourWarpMapper(box, radii)
    warp = needs_warp(profile, mapper)
    outside = mapper.outer_reach if warp else BOOLEAN_OVERSHOOT

    cutout = (
        front_cutout_cross_section(kernel, profile)
        .extrude(box.wall + BOOLEAN_OVERSHOOT + outside)
        .rotate((90.0, 0.0, 0.0))
        .translate((0.0, box.depth / 2 + outside, 0.0))
    )
    if not warp:
        return cutout

    logger.debug(
        f"Bending cutout around the corners (extent left={profile.left_extent:.2f}, "
        f"right={profile.right_extent:.2f})"
    )
    return mapper.apply(cutout.refine_to_length(WARP_REFINE_LENGTH))
