"""CLI command implementations for the skapa application.

- generate: Build a box and write it as STL or a JSON summary
- limits: Show the valid parameter ranges for a box
- validate: Validate a configuration file
"""

from skapa.cli.commands.generate import generate
from skapa.cli.commands.limits import limits
from skapa.cli.commands.validate import validate

__all__ = ["generate", "limits", "validate"]
