"""Placement of the mounting clips on the back face."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..value_objects import (
    CLIP_HEIGHT,
    CLIP_PADDING,
    CLIP_PAIR_HALF_WIDTH,
    CLIP_PITCH,
    BoxParameters,
    ClipPlacement,
    CornerRadii,
    Side,
)
from .limits import CUTOUT_CLEARANCE


@dataclass(frozen=True)
class ClipGrid:
    """Grid of clip pairs: columns along X, rows along Z.

    Columns are centred on the straight part of the back face, which is
    off-centre when the two back radii differ.
    """

    columns: int
    rows: int
    center_x: float
    pitch: float = CLIP_PITCH

    @property
    def first_x(self) -> float:
        return self.center_x - (self.columns - 1) / 2 * self.pitch

    def x(self, column: int) -> float:
        return self.first_x + column * self.pitch

    def z(self, row: int) -> float:
        return row * self.pitch

    def is_corner(self, column: int, row: int) -> bool:
        return column in (0, self.columns - 1) and row in (0, self.rows - 1)

    def placements(self, corner_clips_only: bool = False) -> list[ClipPlacement]:
        """Clip pairs to place; every row above the first is chamfered."""
        result = []
        for column in range(self.columns):
            for row in range(self.rows):
                if corner_clips_only and not self.is_corner(column, row):
                    continue
                result.append(
                    ClipPlacement(
                        column=column,
                        row=row,
                        x=self.x(column),
                        z=self.z(row),
                        chamfer=row > 0,
                    )
                )
        return result


class ClipLayoutService:
    """Fits the clip grid to a box and derives the clearance it leaves."""

    def grid(self, box: BoxParameters, radii: CornerRadii) -> ClipGrid:
        working_width = box.width - radii.back_left - radii.back_right - 2 * CLIP_PADDING
        columns = max(0, math.floor(working_width / CLIP_PITCH + 1))
        rows = max(0, math.floor((box.height - CLIP_HEIGHT) / CLIP_PITCH + 1))
        return ClipGrid(
            columns=columns,
            rows=rows,
            center_x=(radii.back_left - radii.back_right) / 2,
        )

    def back_flat_allowance(
        self, box: BoxParameters, radii: CornerRadii, grid: ClipGrid, side: Side
    ) -> float:
        """Length of back wall an opening may use on one side before the clips.

        Measured from the end of the back corner arc to the outermost clip
        pair, less the cutout clearance. Without clips the opening may run
        up to the centre of the back face.
        """
        _, back_radius = radii.for_side(side)
        back_flat_end = box.width / 2 - back_radius
        if grid.columns <= 0 or grid.rows <= 0:
            return max(0.0, back_flat_end - CUTOUT_CLEARANCE)

        if side == "right":
            outer_clip = grid.x(grid.columns - 1) + CLIP_PAIR_HALF_WIDTH
        else:
            outer_clip = -(grid.x(0) - CLIP_PAIR_HALF_WIDTH)
        return max(0.0, back_flat_end - outer_clip - CUTOUT_CLEARANCE)
