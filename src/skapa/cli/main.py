"""Typer CLI for box generation."""

import typer

from skapa.cli.commands import generate, limits, validate

app = typer.Typer(
    name="skapa",
    help="Generate 3D-printable storage boxes for pegboard-style wall panels.",
    no_args_is_help=True,
)

app.command(name="generate")(generate)
app.command(name="limits")(limits)
app.command(name="validate")(validate)


if __name__ == "__main__":
    app()
