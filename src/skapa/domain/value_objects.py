"""Value objects for the storage box domain.

All lengths are millimetres. The box frame has its origin at the centre of
the bottom face, +X to the right, +Y towards the front face and +Z up. The
back face (y = -depth/2) carries the mounting clips.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal

# Height of one mounting clip along Z.
CLIP_HEIGHT = 12.0

# Distance between clip origins, horizontally and vertically.
CLIP_PITCH = 40.0

# Half-width of a left/right clip pair (max |X| of the clip profile).
CLIP_PAIR_HALF_WIDTH = 3.05

# Margin between the back corner arcs and the outermost clips.
CLIP_PADDING = 5.0

# Extra length beyond the box edge for a clean boolean subtraction.
BOOLEAN_OVERSHOOT = 1.0

# Tessellation density shared by every corner and cutout arc.
ARC_SEGMENTS = 10

# Lower bound for openness, as fraction of the available half-perimeter.
MIN_OPENNESS = 0.05

Side = Literal["left", "right"]

Point2D = tuple[float, float]


def height_for_levels(levels: int) -> float:
    """Outer box height for a number of clip levels.

    Levels are spaced one clip pitch apart, so the box is tall enough for the
    top row of clips to end flush with its rim.
    """
    if levels < 1:
        raise ValueError("A box needs at least one clip level")
    return levels * CLIP_HEIGHT + (levels - 1) * (CLIP_PITCH - CLIP_HEIGHT)


@dataclass(frozen=True)
class BoxParameters:
    """Outer dimensions of the box and the thickness of its walls."""

    height: float
    width: float
    depth: float
    wall: float
    bottom: float

    def __post_init__(self) -> None:
        if min(self.height, self.width, self.depth) <= 0:
            raise ValueError("Box dimensions must be positive")
        if self.wall <= 0 or self.bottom <= 0:
            raise ValueError("Wall and bottom thickness must be positive")

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.wall

    @property
    def inner_depth(self) -> float:
        return self.depth - 2 * self.wall


@dataclass(frozen=True)
class CornerRadii:
    """Independent rounding radius of each vertical box edge.

    The front corners are the ones at +Y. A radius of 0 gives a sharp corner.
    """

    front_left: float
    front_right: float
    back_left: float
    back_right: float

    def __post_init__(self) -> None:
        if min(self.front_left, self.front_right, self.back_left, self.back_right) < 0:
            raise ValueError("Corner radii must be non-negative")

    @classmethod
    def uniform(cls, radius: float) -> CornerRadii:
        """Same radius on all four corners."""
        return cls(radius, radius, radius, radius)

    @property
    def is_uniform(self) -> bool:
        return (
            self.front_left == self.front_right == self.back_left == self.back_right
        )

    @property
    def largest(self) -> float:
        return max(self.front_left, self.front_right, self.back_left, self.back_right)

    def for_side(self, side: Side) -> tuple[float, float]:
        """(front, back) radii of the left or right side."""
        if side == "left":
            return self.front_left, self.back_left
        return self.front_right, self.back_right

    def inset(self, amount: float) -> CornerRadii:
        """Radii of the rectangle offset inwards by `amount`, floored at 0."""
        return CornerRadii(
            front_left=max(0.0, self.front_left - amount),
            front_right=max(0.0, self.front_right - amount),
            back_left=max(0.0, self.back_left - amount),
            back_right=max(0.0, self.back_right - amount),
        )


@dataclass(frozen=True)
class OpenFrontParams:
    """Finger-access opening cut into the front of the box.

    Attributes:
        openness: Fraction (0, 1] of the half-perimeter the opening spans.
        bottom_offset: Gap between the floor and the bottom of the opening.
        cutout_radius: Rounding of the opening's bottom corners.
        back_flat_allowance_left: How far the opening may continue along
            the back wall on the left before reaching the clips.
        back_flat_allowance_right: Same for the right side.
    """

    openness: float
    bottom_offset: float
    cutout_radius: float
    back_flat_allowance_left: float = 0.0
    back_flat_allowance_right: float = 0.0

    def __post_init__(self) -> None:
        if not 0 < self.openness <= 1:
            raise ValueError("Openness must be in (0, 1]")
        if self.bottom_offset < 0 or self.cutout_radius < 0:
            raise ValueError("Bottom offset and cutout radius must be non-negative")

    def back_flat_allowance(self, side: Side) -> float:
        if side == "left":
            return self.back_flat_allowance_left
        return self.back_flat_allowance_right


class ContourRegion(str, Enum):
    """Intervals of the unwrapped perimeter, from front-centre outwards."""

    FRONT_FLAT = "front_flat"
    FRONT_CORNER = "front_corner"
    SIDE_FLAT = "side_flat"
    BACK_CORNER = "back_corner"
    BACK_FLAT = "back_flat"


@dataclass(frozen=True)
class SideContour:
    """Unwrapped perimeter of one half of the box (left or right).

    Distances are measured along the perimeter from the centre of the front
    face. Corner arcs contribute their arc length, so the contour is the
    perimeter the cutout would follow if it were bent around the box.
    """

    width: float
    depth: float
    front_radius: float
    back_radius: float

    @classmethod
    def of(cls, box: BoxParameters, radii: CornerRadii, side: Side) -> SideContour:
        front, back = radii.for_side(side)
        return cls(width=box.width, depth=box.depth, front_radius=front, back_radius=back)

    @property
    def flat_bound(self) -> float:
        """Half-length of the straight part of the front face."""
        return self.width / 2 - self.front_radius

    @property
    def corner_arc(self) -> float:
        return self.front_radius * math.pi / 2

    @property
    def side_flat(self) -> float:
        return self.depth - self.front_radius - self.back_radius

    @property
    def back_arc(self) -> float:
        return self.back_radius * math.pi / 2

    @property
    def corner_end(self) -> float:
        return self.flat_bound + self.corner_arc

    @property
    def side_end(self) -> float:
        return self.corner_end + self.side_flat

    @property
    def back_corner_end(self) -> float:
        return self.side_end + self.back_arc

    @property
    def back_flat(self) -> float:
        """Half-length of the straight part of the back face."""
        return self.width / 2 - self.back_radius

    def max_half_extent(self, include_back_arc: bool = True) -> float:
        """Longest half-extent an opening on this side may reach."""
        length = self.corner_end + self.side_flat
        if include_back_arc:
            length += self.back_arc
        return length

    def region_of(self, distance: float) -> ContourRegion:
        """Region containing an unwrapped distance from front-centre."""
        d = abs(distance)
        if d <= self.flat_bound:
            return ContourRegion.FRONT_FLAT
        if d <= self.corner_end:
            return ContourRegion.FRONT_CORNER
        if d <= self.side_end:
            return ContourRegion.SIDE_FLAT
        if d <= self.back_corner_end:
            return ContourRegion.BACK_CORNER
        return ContourRegion.BACK_FLAT


@dataclass(frozen=True)
class ClipPlacement:
    """Position of one left/right clip pair on the back face."""

    column: int
    row: int
    x: float
    z: float
    chamfer: bool
