"""Validate command for checking configuration files.

Checks a JSON configuration for syntax and schema errors, then reports
values that generation would silently clamp.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from skapa.application import BoxInput, ComputeLimitsCommand
from skapa.application.config import ConfigError, config_to_box_input, load_config
from skapa.domain import MIN_OPENNESS

__all__ = ["validate", "clamping_warnings", "load_error_lines"]


def load_error_lines(error: ConfigError) -> list[str]:
    """Indented report lines for a configuration that failed to load."""
    if error.error_type == "file_not_found":
        return [f"  File not found: {error.path}"]

    if error.error_type == "json_parse":
        lines = ["  Invalid JSON syntax"]
        lines += [
            f"    Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'unknown error')}"
            for d in error.details
        ]
        return lines

    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"  {detail.get('path') or '(root)'}: {detail.get('message')}")
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                lines.append(f"    Value: {value!r}")
        return lines

    return [f"  {error.message}"]


def clamping_warnings(box_input: BoxInput) -> list[str]:
    """Messages for every value generation would pull into range.

    Args:
        box_input: A box input that passed `BoxInput.validate()`.
    """
    warnings: list[str] = []
    limits = ComputeLimitsCommand().execute(box_input)

    corners = ("front_left", "front_right", "back_left", "back_right")
    for corner, value in zip(corners, box_input.corner_radii_tuple):
        if value > limits.max_corner_radius:
            warnings.append(
                f"box.corners.{corner}: radius {value:g} exceeds "
                f"{limits.max_corner_radius:g} mm and will be clamped"
            )

    opening = box_input.open_front
    if opening is not None:
        if opening.openness != limits.openness:
            warnings.append(
                f"open_front.openness: {opening.openness * 100:g}% is outside "
                f"{MIN_OPENNESS * 100:g}-100% and will be clamped to {limits.openness * 100:g}%"
            )
        if opening.bottom_offset > limits.max_bottom_offset:
            warnings.append(
                f"open_front.bottom_offset: {opening.bottom_offset:g} exceeds "
                f"{limits.max_bottom_offset:g} mm and will be clamped"
            )
        if opening.cutout_radius > limits.max_cutout_radius:
            warnings.append(
                f"open_front.cutout_radius: {opening.cutout_radius:g} exceeds "
                f"{limits.max_cutout_radius:g} mm and will be clamped"
            )
    return warnings


def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a box configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but some values will be clamped

    Example:
        skapa validate my-box.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        for line in load_error_lines(e):
            typer.echo(line, err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    box_input = config_to_box_input(config)
    errors = box_input.validate()
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    warnings = clamping_warnings(box_input)
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Configuration is valid.")
