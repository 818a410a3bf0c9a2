"""Valid ranges of the user-tunable box parameters.

These bounds are authoritative: the cutout builder and the contour warp
assume their inputs lie within them and produce distorted geometry
otherwise. Out-of-range requests are clamped, never rejected.
"""

from __future__ import annotations

import math

from ..value_objects import MIN_OPENNESS, BoxParameters, CornerRadii, OpenFrontParams, SideContour

# Clearance kept between the opening and the box rim or the clips.
CUTOUT_CLEARANCE = 1.0


class GeometricLimitCalculator:
    """Pure functions computing parameter bounds for a given box."""

    def max_corner_radius(self, width: float, depth: float) -> float:
        """Largest corner radius that keeps the outline non-self-intersecting."""
        return min(width, depth) / 2

    def max_bottom_offset(self, height: float, bottom: float) -> float:
        """Highest start of the opening that still leaves a 1 mm lip below the rim."""
        return max(0.0, math.floor(height - bottom) - CUTOUT_CLEARANCE)

    def max_half_extent(
        self,
        box: BoxParameters,
        radii: CornerRadii,
        include_back_arc: bool = False,
    ) -> float:
        """Half-perimeter available to the opening on its narrower side."""
        return min(
            SideContour.of(box, radii, side).max_half_extent(include_back_arc)
            for side in ("left", "right")
        )

    def max_cutout_radius(
        self,
        box: BoxParameters,
        radii: CornerRadii,
        openness: float,
        bottom_offset: float,
        include_back_arc: bool = False,
    ) -> float:
        """Largest bottom-corner radius of the opening.

        Bounded by half the opening's vertical span and by the opening's
        half-extent at the current openness, less the clearance.
        """
        half_extent = openness * self.max_half_extent(box, radii, include_back_arc)
        span = (box.height - box.bottom - bottom_offset) / 2
        return max(0.0, math.floor(min(half_extent, span)) - CUTOUT_CLEARANCE)

    def clamp_radii(self, box: BoxParameters, radii: CornerRadii) -> CornerRadii:
        limit = self.max_corner_radius(box.width, box.depth)
        return CornerRadii(
            front_left=min(max(radii.front_left, 0.0), limit),
            front_right=min(max(radii.front_right, 0.0), limit),
            back_left=min(max(radii.back_left, 0.0), limit),
            back_right=min(max(radii.back_right, 0.0), limit),
        )

    def clamp_open_front(
        self,
        box: BoxParameters,
        radii: CornerRadii,
        openness: float,
        bottom_offset: float,
        cutout_radius: float,
    ) -> OpenFrontParams:
        """Opening parameters pulled into their valid ranges.

        Openness is clamped first, then the bottom offset, then the cutout
        radius, since each bound depends on the values before it.
        """
        openness = min(max(openness, MIN_OPENNESS), 1.0)
        bottom_offset = min(max(bottom_offset, 0.0), self.max_bottom_offset(box.height, box.bottom))
        max_radius = self.max_cutout_radius(box, radii, openness, bottom_offset)
        cutout_radius = min(max(cutout_radius, 0.0), max_radius)
        return OpenFrontParams(
            openness=openness,
            bottom_offset=bottom_offset,
            cutout_radius=cutout_radius,
        )
