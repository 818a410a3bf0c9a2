"""Limits command: show the valid parameter ranges for a box."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from skapa.application import ComputeLimitsCommand
from skapa.application.config import ConfigError, config_to_box_input

from .generate import resolve_config

__all__ = ["limits"]


def limits(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    levels: Annotated[
        int | None,
        typer.Option("--levels", "-l", help="Number of clip rows (sets the height)"),
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", help="Outer height in mm")
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Outer width in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Outer depth in mm")
    ] = None,
    radius: Annotated[
        float | None,
        typer.Option("--radius", "-r", help="Corner radius in mm (all corners)"),
    ] = None,
    wall: Annotated[
        float | None, typer.Option("--wall", help="Wall thickness in mm")
    ] = None,
    bottom: Annotated[
        float | None, typer.Option("--bottom", help="Bottom thickness in mm")
    ] = None,
    openness: Annotated[
        float | None,
        typer.Option("--openness", help="Opening width in percent (5-100)"),
    ] = None,
    bottom_offset: Annotated[
        float | None,
        typer.Option("--bottom-offset", help="Height of the opening above the floor"),
    ] = None,
) -> None:
    """Show the valid ranges of corner radius, opening offset and cutout radius.

    Example:
        skapa limits --width 80 --depth 60 --levels 2 --openness 70
    """
    try:
        config = resolve_config(
            config_file,
            width=width,
            depth=depth,
            height=height,
            levels=levels,
            radius=radius,
            wall=wall,
            bottom=bottom,
            openness=openness,
            bottom_offset=bottom_offset,
        )
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    box_input = config_to_box_input(config)
    result = ComputeLimitsCommand().execute(box_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Box {box_input.width:g} x {box_input.depth:g} x {box_input.height:g} mm"
    )
    typer.echo(f"  Corner radius:  0 - {result.max_corner_radius:g} mm")
    typer.echo(f"  Bottom offset:  0 - {result.max_bottom_offset:g} mm")
    typer.echo(
        f"  Cutout radius:  0 - {result.max_cutout_radius:g} mm "
        f"(at {result.openness * 100:g}% openness, "
        f"{result.bottom_offset:g} mm offset)"
    )
    typer.echo(f"  Clip grid:      {result.clip_columns} x {result.clip_rows}")
