"""Circular arc tessellation."""

from __future__ import annotations

import math

from ..value_objects import ARC_SEGMENTS, Point2D


def generate_arc(
    center: Point2D,
    radius: float,
    start_angle: float = 0.0,
    end_angle: float = math.pi / 2,
    segments: int = ARC_SEGMENTS,
) -> list[Point2D]:
    """Points along an arc, from start_angle to end_angle inclusive.

    The arc is counter-clockwise when end_angle > start_angle. `segments`
    intermediate subdivisions yield `segments + 2` evenly spaced points. A
    zero radius yields the centre repeated.

    Args:
        center: Arc centre (x, y).
        radius: Arc radius.
        start_angle: Angle of the first point, in radians.
        end_angle: Angle of the last point, in radians.
        segments: Subdivision count.

    Returns:
        List of (x, y) points.
    """
    cx, cy = center
    n_points = segments + 2
    step = (end_angle - start_angle) / (n_points - 1)
    points: list[Point2D] = []
    for i in range(n_points):
        angle = start_angle + i * step
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points
