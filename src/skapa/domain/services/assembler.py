"""Assembly of the final box solid."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from manifold3d import Manifold

from ..kernel import SolidKernel
from ..value_objects import BoxParameters, CornerRadii, OpenFrontParams
from .clip_layout import ClipLayoutService
from .clip_profile import clips
from .front_cutout import front_cutout
from .rounded_rectangle import rounded_rectangle

logger = logging.getLogger(__name__)


class BoxAssembler:
    """Builds the box solid: shell, interior, optional opening and clips.

    The assembler is stateless apart from the kernel handle it captures;
    every call builds a new solid from the parameters it is given. It does
    not validate geometric preconditions, see `GeometricLimitCalculator`.
    """

    def __init__(
        self,
        kernel: SolidKernel,
        clip_layout: ClipLayoutService | None = None,
    ) -> None:
        self.kernel = kernel
        self.clip_layout = clip_layout or ClipLayoutService()

    def base(
        self,
        box: BoxParameters,
        radii: CornerRadii,
        open_front: OpenFrontParams | None = None,
    ) -> Manifold:
        """The box without clips, origin at the centre of the bottom face."""
        outer = rounded_rectangle(self.kernel, (box.width, box.depth), radii).extrude(
            box.height
        )
        inner = (
            rounded_rectangle(
                self.kernel,
                (box.inner_width, box.inner_depth),
                radii.inset(box.wall),
            )
            .extrude(box.height - box.bottom)
            .translate((0.0, 0.0, box.bottom))
        )
        result = outer - inner

        if open_front is not None:
            result = result - front_cutout(self.kernel, box, radii, open_front)

        return result

    def build(
        self,
        box: BoxParameters,
        radii: CornerRadii,
        open_front: OpenFrontParams | None = None,
        corner_clips_only: bool = False,
    ) -> Manifold:
        """The box with its clip pairs hanging behind the back face.

        Args:
            box: Box dimensions.
            radii: Corner radii of the outer shell.
            open_front: Optional front opening.
            corner_clips_only: Only place clips on the four grid corners.

        Returns:
            The final solid.
        """
        grid = self.clip_layout.grid(box, radii)

        if open_front is not None:
            open_front = replace(
                open_front,
                back_flat_allowance_left=self.clip_layout.back_flat_allowance(
                    box, radii, grid, "left"
                ),
                back_flat_allowance_right=self.clip_layout.back_flat_allowance(
                    box, radii, grid, "right"
                ),
            )

        result = self.base(box, radii, open_front)

        placements = grid.placements(corner_clips_only)
        plain = chamfered = None
        for placement in placements:
            if placement.chamfer:
                chamfered = chamfered or clips(self.kernel, chamfer=True)
                pair = chamfered
            else:
                plain = plain or clips(self.kernel, chamfer=False)
                pair = plain
            offset = (placement.x, -box.depth / 2, placement.z)
            for clip in pair:
                result = result + clip.translate(offset)

        logger.debug(
            f"Assembled {box.width}x{box.depth}x{box.height} box with "
            f"{len(placements)} clip pairs ({grid.columns}x{grid.rows} grid)"
        )
        return result


async def box(
    kernel: SolidKernel,
    height: float,
    width: float,
    depth: float,
    radii: CornerRadii | float,
    wall: float,
    bottom: float,
    open_front: OpenFrontParams | None = None,
    corner_clips_only: bool = False,
) -> Manifold:
    """Build a box off the calling thread.

    The kernel is set up on first use, then the build runs in a worker thread
    so a slow rebuild does not stall the event loop.
    """
    if not isinstance(radii, CornerRadii):
        radii = CornerRadii.uniform(radii)
    params = BoxParameters(height=height, width=width, depth=depth, wall=wall, bottom=bottom)
    assembler = BoxAssembler(kernel.setup())
    return await asyncio.to_thread(
        assembler.build, params, radii, open_front, corner_clips_only
    )
