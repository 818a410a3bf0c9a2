"""Reading box configuration files.

Every failure, from a missing file to a schema violation, is reported as a
`ConfigError` whose `details` point at the offending location: a line and
column for broken JSON, a dotted path such as `box.corners.front_left` for
values the schema rejects.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from skapa.application.config.schema import BoxConfiguration


class ConfigError(Exception):
    """A configuration could not be read or is invalid.

    Attributes:
        message: Human-readable summary, also the exception text.
        error_type: "file_not_found", "file_read_error", "json_parse" or
            "validation".
        path: The configuration file, None for in-memory documents.
        details: One dict per problem found.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details or [])

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Dotted path of a pydantic error location; list indices in brackets.

    >>> _format_json_path(("box", "corners", "back_left"))
    'box.corners.back_left'
    >>> _format_json_path(("levels", 0))
    'levels[0]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _problem(err: dict[str, Any]) -> dict[str, Any]:
    return {
        "path": _format_json_path(err["loc"]),
        "message": err["msg"],
        "value": err.get("input"),
        "error_type": err["type"],
    }


def _describe(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        line = f"  - {problem['path'] or '(root)'}: {problem['message']}"
        value = problem["value"]
        # whole sections are echoed back as input; only show scalars
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> BoxConfiguration:
    try:
        return BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = [_problem(err) for err in e.errors()]
        raise ConfigError(
            _describe(problems), error_type="validation", path=path, details=problems
        ) from e


def load_config(path: Path) -> BoxConfiguration:
    """Load and validate a box configuration from a JSON file.

    Args:
        path: Configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or does
            not match the schema.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", error_type="file_read_error", path=path
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> BoxConfiguration:
    """Validate an in-memory configuration document.

    Raises:
        ConfigError: If the document does not match the schema.
    """
    return _validate(data)
