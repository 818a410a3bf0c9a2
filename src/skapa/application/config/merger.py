"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from typing import Any

from skapa.application.config.loader import load_config_from_dict
from skapa.application.config.schema import BoxConfiguration


def merge_config_with_cli(
    config: BoxConfiguration,
    *,
    width: float | None = None,
    depth: float | None = None,
    height: float | None = None,
    levels: int | None = None,
    radius: float | None = None,
    front_left: float | None = None,
    front_right: float | None = None,
    back_left: float | None = None,
    back_right: float | None = None,
    wall: float | None = None,
    bottom: float | None = None,
    dimensions_are_inner: bool | None = None,
    open_front: bool | None = None,
    openness: float | None = None,
    bottom_offset: float | None = None,
    cutout_radius: float | None = None,
    corner_clips_only: bool | None = None,
    output_format: str | None = None,
    output_file: str | None = None,
) -> BoxConfiguration:
    """Merge CLI arguments with configuration values.

    Giving `height` drops a configured `levels` and vice versa, since only
    one of them may be set. Any of the opening options creates an
    `open_front` section when the configuration has none, unless
    `open_front` is explicitly False.

    Returns:
        A new, re-validated BoxConfiguration.

    Raises:
        ConfigError: If the merged values are invalid.

    Example:
        >>> merged = merge_config_with_cli(config, width=100.0)
        >>> merged.box.width
        100.0
    """
    data: dict[str, Any] = config.model_dump(mode="json")
    box = data["box"]

    for key, value in (
        ("width", width),
        ("depth", depth),
        ("radius", radius),
        ("wall", wall),
        ("bottom", bottom),
        ("dimensions_are_inner", dimensions_are_inner),
    ):
        if value is not None:
            box[key] = value

    if height is not None:
        box["height"] = height
        box["levels"] = None
    elif levels is not None:
        box["levels"] = levels
        box["height"] = None

    corners = {
        key: value
        for key, value in (
            ("front_left", front_left),
            ("front_right", front_right),
            ("back_left", back_left),
            ("back_right", back_right),
        )
        if value is not None
    }
    if corners:
        box["corners"] = {**(box.get("corners") or {}), **corners}

    opening = {
        key: value
        for key, value in (
            ("openness", openness),
            ("bottom_offset", bottom_offset),
            ("cutout_radius", cutout_radius),
        )
        if value is not None
    }
    if open_front is False:
        data["open_front"] = None
    elif open_front or opening or data.get("open_front") is not None:
        section = data.get("open_front") or {}
        section.update(opening)
        if open_front:
            section["enabled"] = True
        data["open_front"] = section

    if corner_clips_only is not None:
        data["clips"]["corner_clips_only"] = corner_clips_only
    if output_format is not None:
        data["output"]["format"] = output_format
    if output_file is not None:
        data["output"]["file"] = output_file

    return load_config_from_dict(data)
