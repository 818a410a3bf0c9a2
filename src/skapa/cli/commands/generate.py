"""Generate command for the skapa CLI.

Builds one box from command-line options, a JSON configuration file, or a
configuration file with command-line overrides, and writes it as STL or as
a JSON summary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from skapa.application import BoxOutput, GenerateBoxCommand
from skapa.application.config import (
    BoxConfiguration,
    ConfigError,
    config_to_box_input,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from skapa.infrastructure.exporters import ExporterRegistry, JsonSummaryExporter

__all__ = ["generate", "resolve_config", "configure_logging"]

logger = logging.getLogger(__name__)

DEFAULT_BOX: dict[str, Any] = {"width": 80.0, "depth": 60.0, "levels": 2}


def configure_logging(verbose: bool) -> None:
    """Route library logs to stderr; debug level with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_config(config_file: Path | None, **overrides: Any) -> BoxConfiguration:
    """Load the configuration file, or the default box, and apply overrides.

    Raises:
        ConfigError: If the file cannot be loaded or the result is invalid.
    """
    if config_file is not None:
        config = load_config(config_file)
    else:
        config = load_config_from_dict({"box": dict(DEFAULT_BOX)})
    return merge_config_with_cli(config, **overrides)


def _report_clamping(config: BoxConfiguration, output: BoxOutput) -> None:
    """Tell the user about values pulled into their valid range."""
    if output.radii is not None:
        for corner in ("front_left", "front_right", "back_left", "back_right"):
            requested = config.box.corner_radius(corner)
            used = getattr(output.radii, corner)
            if used != requested:
                typer.echo(
                    f"Note: {corner} radius clamped from {requested:g} to {used:g} mm",
                    err=True,
                )

    requested_front = config.open_front
    if output.open_front is not None and requested_front is not None:
        if output.open_front.openness != requested_front.openness / 100:
            typer.echo(
                f"Note: openness clamped from {requested_front.openness:g}% "
                f"to {output.open_front.openness * 100:g}%",
                err=True,
            )
        if output.open_front.bottom_offset != requested_front.bottom_offset:
            typer.echo(
                f"Note: bottom offset clamped from {requested_front.bottom_offset:g} "
                f"to {output.open_front.bottom_offset:g} mm",
                err=True,
            )
        if output.open_front.cutout_radius != requested_front.cutout_radius:
            typer.echo(
                f"Note: cutout radius clamped from {requested_front.cutout_radius:g} "
                f"to {output.open_front.cutout_radius:g} mm",
                err=True,
            )


def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    levels: Annotated[
        int | None,
        typer.Option("--levels", "-l", help="Number of clip rows (sets the height)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Outer height in mm"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Outer width in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Outer depth in mm"),
    ] = None,
    radius: Annotated[
        float | None,
        typer.Option("--radius", "-r", help="Corner radius in mm (all corners)"),
    ] = None,
    front_left: Annotated[
        float | None, typer.Option("--front-left", help="Front-left corner radius")
    ] = None,
    front_right: Annotated[
        float | None, typer.Option("--front-right", help="Front-right corner radius")
    ] = None,
    back_left: Annotated[
        float | None, typer.Option("--back-left", help="Back-left corner radius")
    ] = None,
    back_right: Annotated[
        float | None, typer.Option("--back-right", help="Back-right corner radius")
    ] = None,
    wall: Annotated[
        float | None,
        typer.Option("--wall", help="Wall thickness in mm"),
    ] = None,
    bottom: Annotated[
        float | None,
        typer.Option("--bottom", help="Bottom thickness in mm"),
    ] = None,
    inner: Annotated[
        bool,
        typer.Option("--inner", help="Treat width and depth as inner dimensions"),
    ] = False,
    open_front: Annotated[
        bool | None,
        typer.Option(
            "--open-front/--closed-front", help="Cut an opening into the front"
        ),
    ] = None,
    openness: Annotated[
        float | None,
        typer.Option("--openness", help="Opening width in percent (5-100)"),
    ] = None,
    bottom_offset: Annotated[
        float | None,
        typer.Option("--bottom-offset", help="Height of the opening above the floor"),
    ] = None,
    cutout_radius: Annotated[
        float | None,
        typer.Option("--cutout-radius", help="Radius of the opening's corners"),
    ] = None,
    all_clips: Annotated[
        bool,
        typer.Option("--all-clips", help="Place a clip at every grid position"),
    ] = False,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: stl or json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    y_up: Annotated[
        bool,
        typer.Option("--y-up", help="Write the STL with Y as the up axis, for viewers"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Generate a wall-mount storage box.

    Without --config an 80 x 60 mm box with two clip levels is the starting
    point; every option overrides the corresponding configuration value.

    Examples:
        skapa generate --width 100 --depth 50 --levels 3 -o box.stl
        skapa generate --config box.json --open-front --openness 70
        skapa generate -w 80 -d 60 --format json
        skapa generate --y-up -o preview.stl
    """
    configure_logging(verbose)

    try:
        config = resolve_config(
            config_file,
            width=width,
            depth=depth,
            height=height,
            levels=levels,
            radius=radius,
            front_left=front_left,
            front_right=front_right,
            back_left=back_left,
            back_right=back_right,
            wall=wall,
            bottom=bottom,
            dimensions_are_inner=True if inner else None,
            open_front=open_front,
            openness=openness,
            bottom_offset=bottom_offset,
            cutout_radius=cutout_radius,
            corner_clips_only=False if all_clips else None,
            output_format=output_format,
            output_file=str(output_file) if output_file else None,
        )
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    format_name = config.output.format.value
    if y_up and format_name != "stl":
        typer.echo("Error: --y-up only applies to STL output", err=True)
        raise typer.Exit(code=1)

    box_input = config_to_box_input(config)
    output = GenerateBoxCommand().execute(box_input)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    _report_clamping(config, output)

    if format_name == "json" and config.output.file is None:
        typer.echo(JsonSummaryExporter().export_string(output))
        return

    exporter = ExporterRegistry.create(format_name, **({"y_up": True} if y_up else {}))
    path = Path(config.output.file or f"{output.file_stem}.{exporter.file_extension}")
    try:
        exporter.export(output, path)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    box = output.box
    typer.echo(
        f"Generated {box.width:g} x {box.depth:g} x {box.height:g} mm box "
        f"with {len(output.clips)} clip pair(s)"
    )
    typer.echo(f"{format_name.upper()} written to: {path}")
