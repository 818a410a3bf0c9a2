"""Application commands (use cases) for box generation."""

from __future__ import annotations

import asyncio
import logging

from skapa.domain import (
    BoxAssembler,
    ClipLayoutService,
    GeometricLimitCalculator,
    SolidKernel,
)

from .dtos import BoxInput, BoxOutput, LimitsOutput, OpenFrontInput

logger = logging.getLogger(__name__)


class BoxGenerationError(Exception):
    """Raised when a box cannot be generated from the given input."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


class GenerateBoxCommand:
    """Command to generate a box solid from user input.

    Inputs are validated for basic sanity (positive sizes, walls that fit)
    and then clamped into the geometric limits before the solid is built,
    so a request for an oversized corner or cutout radius still yields a
    box instead of an error.
    """

    def __init__(
        self,
        kernel: SolidKernel | None = None,
        limits: GeometricLimitCalculator | None = None,
        clip_layout: ClipLayoutService | None = None,
    ) -> None:
        self.kernel = kernel or SolidKernel()
        self.limits = limits or GeometricLimitCalculator()
        self.clip_layout = clip_layout or ClipLayoutService()

    def execute(self, box_input: BoxInput) -> BoxOutput:
        """Execute the box generation command.

        Args:
            box_input: Box dimensions, radii, opening and clip options.

        Returns:
            BoxOutput with the solid and the parameters actually used, or
            with errors if the input is invalid.
        """
        errors = box_input.validate()
        if errors:
            return BoxOutput(solid=None, errors=errors)

        box = box_input.to_box_parameters()
        radii = self.limits.clamp_radii(box, box_input.to_corner_radii())

        open_front = None
        if box_input.open_front is not None:
            open_front = self.limits.clamp_open_front(
                box,
                radii,
                openness=box_input.open_front.openness,
                bottom_offset=box_input.open_front.bottom_offset,
                cutout_radius=box_input.open_front.cutout_radius,
            )

        assembler = BoxAssembler(self.kernel.setup(), clip_layout=self.clip_layout)
        solid = assembler.build(box, radii, open_front, box_input.corner_clips_only)
        placements = self.clip_layout.grid(box, radii).placements(
            box_input.corner_clips_only
        )

        return BoxOutput(
            solid=solid,
            box=box,
            radii=radii,
            open_front=open_front,
            clips=placements,
        )

    async def execute_async(self, box_input: BoxInput) -> BoxOutput:
        """Run `execute` in a worker thread."""
        return await asyncio.to_thread(self.execute, box_input)


class ComputeLimitsCommand:
    """Command reporting the valid parameter ranges for a box.

    Used by front ends to bound their inputs before asking for a build.
    A box without an opening is reported with the default opening, so the
    cutout bounds are known before the opening is switched on.
    """

    def __init__(
        self,
        limits: GeometricLimitCalculator | None = None,
        clip_layout: ClipLayoutService | None = None,
    ) -> None:
        self.limits = limits or GeometricLimitCalculator()
        self.clip_layout = clip_layout or ClipLayoutService()

    def execute(self, box_input: BoxInput) -> LimitsOutput:
        errors = box_input.validate()
        if errors:
            return LimitsOutput(errors=errors)

        box = box_input.to_box_parameters()
        radii = self.limits.clamp_radii(box, box_input.to_corner_radii())
        requested = box_input.open_front or OpenFrontInput()
        opening = self.limits.clamp_open_front(
            box,
            radii,
            openness=requested.openness,
            bottom_offset=requested.bottom_offset,
            cutout_radius=requested.cutout_radius,
        )
        grid = self.clip_layout.grid(box, radii)

        return LimitsOutput(
            max_corner_radius=self.limits.max_corner_radius(box.width, box.depth),
            max_bottom_offset=self.limits.max_bottom_offset(box.height, box.bottom),
            max_cutout_radius=self.limits.max_cutout_radius(
                box, radii, opening.openness, opening.bottom_offset
            ),
            openness=opening.openness,
            bottom_offset=opening.bottom_offset,
            clip_columns=grid.columns,
            clip_rows=grid.rows,
        )


class BoxRegenerator:
    """Coalesces rapid regeneration requests; the latest request wins.

    At most one build runs at a time. Requests made while a build is in
    flight replace any earlier pending request; when the running build
    finishes, only the newest pending request is built. Builds are never
    interrupted: a superseded result is simply discarded and its caller
    receives None.
    """

    def __init__(self, command: GenerateBoxCommand | None = None) -> None:
        self.command = command or GenerateBoxCommand()
        self._ticket = 0
        self._lock = asyncio.Lock()
        self.latest: BoxOutput | None = None

    @property
    def current_ticket(self) -> int:
        return self._ticket

    async def request(self, box_input: BoxInput) -> BoxOutput | None:
        """Build `box_input` unless a newer request supersedes it.

        Returns:
            The output, or None if a newer request arrived first.
        """
        self._ticket += 1
        ticket = self._ticket

        async with self._lock:
            if ticket != self._ticket:
                logger.debug(f"Skipping superseded regeneration #{ticket}")
                return None
            output = await self.command.execute_async(box_input)

        if ticket != self._ticket:
            logger.debug(f"Discarding stale regeneration #{ticket}")
            return None

        self.latest = output
        return output
