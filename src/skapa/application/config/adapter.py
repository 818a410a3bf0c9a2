"""Conversion of validated configurations into application DTOs."""

from __future__ import annotations

from skapa.application.config.schema import BoxConfiguration
from skapa.application.dtos import BoxInput, OpenFrontInput


def config_to_box_input(config: BoxConfiguration) -> BoxInput:
    """Build a BoxInput from a configuration.

    Inner dimensions are converted to outer ones, the height is derived
    from the level count when needed and the openness percentage becomes a
    fraction. A disabled opening yields a closed box.
    """
    box = config.box
    open_front = None
    if config.open_front is not None and config.open_front.enabled:
        open_front = OpenFrontInput(
            openness=config.open_front.openness / 100,
            bottom_offset=config.open_front.bottom_offset,
            cutout_radius=config.open_front.cutout_radius,
        )

    return BoxInput(
        height=box.outer_height,
        width=box.outer_width,
        depth=box.outer_depth,
        radius_front_left=box.corner_radius("front_left"),
        radius_front_right=box.corner_radius("front_right"),
        radius_back_left=box.corner_radius("back_left"),
        radius_back_right=box.corner_radius("back_right"),
        wall=box.wall,
        bottom=box.bottom,
        open_front=open_front,
        corner_clips_only=config.clips.corner_clips_only,
    )
