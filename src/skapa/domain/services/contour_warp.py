"""Bending of flat cutout geometry around the box perimeter.

A solid laid out against the flat front face, with X as the unwrapped
distance from front-centre, is mapped onto the real perimeter: straight
along the front, around the front corner, down the side, around the back
corner and along the back. Each side of the box has its own contour, since
left and right corner radii may differ.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from manifold3d import Manifold

from ..value_objects import (
    BOOLEAN_OVERSHOOT,
    BoxParameters,
    ContourRegion,
    CornerRadii,
    Side,
    SideContour,
)

# Floor for the distance to a corner's pivot, keeps bent triangles non-degenerate.
MIN_LOCAL_RADIUS = 0.01


@dataclass(frozen=True)
class CornerBend:
    """How one corner of a side is bent around.

    A corner is bent about a pivot `radius` inside both faces. For corners
    rounder than the pivot depth this is the corner's own arc. Tighter
    corners, sharp ones included, are bent about a deeper pivot over a longer
    `span` of the contour, so the faces on either side land exactly where
    the true perimeter puts them.

    Attributes:
        start: Contour distance where the bend begins.
        span: Contour length covered by the quarter turn.
        radius: Distance from the pivot to the outer faces.
    """

    start: float
    span: float
    radius: float

    @classmethod
    def around(cls, start: float, corner_radius: float, pivot_depth: float) -> CornerBend:
        """Bend for a corner whose true arc begins at contour distance `start`."""
        radius = max(corner_radius, pivot_depth)
        lead = radius - corner_radius
        return cls(
            start=start - lead,
            span=2 * lead + corner_radius * math.pi / 2,
            radius=radius,
        )

    @property
    def end(self) -> float:
        return self.start + self.span

    def angle(self, d: np.ndarray) -> np.ndarray:
        return (d - self.start) / self.span * (math.pi / 2)


class ContourWarpMapper:
    """Maps points from unwrapped contour space onto the box perimeter.

    A point (x, y, z) is read as: |x| the distance along the perimeter,
    sign(x) the side, y - depth/2 the offset from the front face (negative
    inside the wall) and z the height, which is left untouched. Vertices
    on the flat front are unchanged, so the map is the identity for openings
    that stay clear of the corners.

    Corners are bent about a pivot at least `pivot_depth` inside the box, so
    every layer of a slab reaching `wall + BOOLEAN_OVERSHOOT` inwards keeps a
    positive bend radius. Solids bent around a corner tighter than that must
    reach `pivot_depth` outwards to cover it, see `outer_reach`.

    Inputs outside the perimeter (beyond the back-flat centre) are mapped by
    extending the back flat; callers clamp openness so this does not happen.
    """

    def __init__(self, box: BoxParameters, radii: CornerRadii) -> None:
        self.box = box
        self.radii = radii
        self.pivot_depth = min(
            box.wall + 2 * BOOLEAN_OVERSHOOT, min(box.width, box.depth) / 2
        )
        self._contours: dict[Side, SideContour] = {
            "left": SideContour.of(box, radii, "left"),
            "right": SideContour.of(box, radii, "right"),
        }

    @property
    def outer_reach(self) -> float:
        """How far outside the faces a bent solid must extend to cover a sharp corner."""
        return self.pivot_depth

    def contour(self, side: Side) -> SideContour:
        return self._contours[side]

    def bends(self, side: Side) -> tuple[CornerBend, CornerBend]:
        """(front, back) corner bends of a side."""
        c = self._contours[side]
        front = CornerBend.around(c.flat_bound, c.front_radius, self.pivot_depth)
        back = CornerBend.around(c.side_end, c.back_radius, self.pivot_depth)
        return front, back

    def region_of(self, x: float) -> ContourRegion:
        side: Side = "right" if x >= 0 else "left"
        return self._contours[side].region_of(x)

    def map_points(self, points: np.ndarray) -> np.ndarray:
        """Map an (n, 3) array of vertices. Returns a new array."""
        points = np.asarray(points, dtype=np.float64)
        out = points.copy()
        x = points[:, 0]
        for side, on_side in (("right", x >= 0), ("left", x < 0)):
            if on_side.any():
                out[on_side] = self._map_side(points[on_side], side)
        return out

    def map_point(self, point: tuple[float, float, float]) -> tuple[float, float, float]:
        x, y, z = self.map_points(np.array([point], dtype=np.float64))[0]
        return float(x), float(y), float(z)

    def apply(self, solid: Manifold) -> Manifold:
        """Warp every vertex of a kernel solid."""
        return solid.warp_batch(self.map_points)

    def _map_side(self, points: np.ndarray, side: Side) -> np.ndarray:
        sign = 1.0 if side == "right" else -1.0
        front, back = self.bends(side)
        half_width = self.box.width / 2
        half_depth = self.box.depth / 2

        d = np.abs(points[:, 0])
        offset = points[:, 1] - half_depth
        x_out = points[:, 0].copy()
        y_out = points[:, 1].copy()

        front_cx, front_cy = half_width - front.radius, half_depth - front.radius
        back_cx, back_cy = half_width - back.radius, -half_depth + back.radius

        front_corner = (d > front.start) & (d <= front.end)
        side_flat = (d > front.end) & (d <= back.start)
        back_corner = (d > back.start) & (d <= back.end)
        back_flat = d > back.end

        if front_corner.any():
            theta = front.angle(d[front_corner])
            r_local = np.maximum(front.radius + offset[front_corner], MIN_LOCAL_RADIUS)
            x_out[front_corner] = sign * (front_cx + r_local * np.sin(theta))
            y_out[front_corner] = front_cy + r_local * np.cos(theta)

        if side_flat.any():
            x_out[side_flat] = sign * (half_width + offset[side_flat])
            y_out[side_flat] = front_cy - (d[side_flat] - front.end)

        if back_corner.any():
            theta = back.angle(d[back_corner])
            r_local = np.maximum(back.radius + offset[back_corner], MIN_LOCAL_RADIUS)
            x_out[back_corner] = sign * (back_cx + r_local * np.cos(theta))
            y_out[back_corner] = back_cy - r_local * np.sin(theta)

        if back_flat.any():
            x_out[back_flat] = sign * (back_cx - (d[back_flat] - back.end))
            y_out[back_flat] = -half_depth - offset[back_flat]

        return np.column_stack((x_out, y_out, points[:, 2]))
