"""Pegboard mounting clips."""

from __future__ import annotations

from manifold3d import CrossSection, Manifold

from ..kernel import SolidKernel
from ..value_objects import CLIP_HEIGHT, Point2D

# Silhouette of the right-hand clip, hook pointing outwards.
CLIP_PROFILE: tuple[Point2D, ...] = (
    (0.95, 0.0),
    (2.45, 0.0),
    (2.45, 3.7),
    (3.05, 4.3),
    (3.05, 5.9),
    (2.45, 6.5),
    (0.95, 6.5),
)

# Normal of the 45 degree plane that chamfers the bottom of a clip.
CHAMFER_NORMAL = (0.0, 1.0, 1.0)


def clip_cross_section(kernel: SolidKernel) -> CrossSection:
    """Clip profile turned to hang behind the origin (-Y)."""
    return kernel.cross_section(CLIP_PROFILE).rotate(180)


def clips(kernel: SolidKernel, chamfer: bool = False) -> tuple[Manifold, Manifold]:
    """Left and right clip solids, starting at the origin and rising along +Z.

    The chamfered variant has its overhanging bottom cut at 45 degrees so it
    prints without supports; it is used for every row but the lowest.

    Args:
        kernel: Kernel handle.
        chamfer: Trim the bottom overhang.

    Returns:
        (left, right) clip solids.
    """
    profile = clip_cross_section(kernel)
    right = profile.extrude(CLIP_HEIGHT)
    left = profile.mirror((1.0, 0.0)).extrude(CLIP_HEIGHT)

    if not chamfer:
        return left, right

    return (
        left.trim_by_plane(CHAMFER_NORMAL, 0.0),
        right.trim_by_plane(CHAMFER_NORMAL, 0.0),
    )
