"""Rounded rectangle cross-sections with independent corner radii."""

from __future__ import annotations

from manifold3d import CrossSection

from ..kernel import SolidKernel
from ..value_objects import ARC_SEGMENTS, CornerRadii, Point2D
from .arc import generate_arc


def _front_right_arc(
    width: float, depth: float, radius: float, segments: int
) -> list[Point2D]:
    """Quarter arc of a corner in the front-right (+X, +Y) position."""
    return generate_arc(
        center=(width / 2 - radius, depth / 2 - radius),
        radius=radius,
        segments=segments,
    )


def rounded_rectangle_points(
    size: tuple[float, float],
    radii: CornerRadii | float,
    segments: int = ARC_SEGMENTS,
) -> list[Point2D]:
    """Vertices of a rounded rectangle centred on the origin.

    Each corner is a front-right arc mirrored into place. Mirroring about one
    axis flips the winding, so those corners are also reversed; the result is
    counter-clockwise, ordered front-right, front-left, back-left, back-right,
    and always holds 4 * (segments + 2) points. Radii larger than half of the
    adjacent side produce a self-intersecting outline.

    Args:
        size: (width, depth) of the rectangle.
        radii: Per-corner radii, or one radius for all corners.
        segments: Arc subdivision count.

    Returns:
        List of (x, y) vertices.
    """
    if not isinstance(radii, CornerRadii):
        radii = CornerRadii.uniform(radii)
    width, depth = size

    front_right = _front_right_arc(width, depth, radii.front_right, segments)

    front_left = [(-x, y) for x, y in _front_right_arc(width, depth, radii.front_left, segments)]
    front_left.reverse()

    back_left = [(-x, -y) for x, y in _front_right_arc(width, depth, radii.back_left, segments)]

    back_right = [(x, -y) for x, y in _front_right_arc(width, depth, radii.back_right, segments)]
    back_right.reverse()

    return front_right + front_left + back_left + back_right


def rounded_rectangle(
    kernel: SolidKernel,
    size: tuple[float, float],
    radii: CornerRadii | float,
    segments: int = ARC_SEGMENTS,
) -> CrossSection:
    """Kernel cross-section of `rounded_rectangle_points`."""
    return kernel.cross_section(rounded_rectangle_points(size, radii, segments))
