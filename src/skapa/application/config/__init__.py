"""Configuration schema and loading system for box configurations.

Public API:
    - BoxConfiguration: Root configuration model
    - BoxConfig, CornerRadiiConfig, OpenFrontConfig, ClipsConfig, OutputConfig
    - load_config / load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_box_input: Convert a configuration to a BoxInput DTO

Example:
    >>> from pathlib import Path
    >>> from skapa.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-box.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from skapa.application.config.adapter import config_to_box_input
from skapa.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from skapa.application.config.merger import merge_config_with_cli
from skapa.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoxConfig,
    BoxConfiguration,
    ClipsConfig,
    CornerRadiiConfig,
    OpenFrontConfig,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "BoxConfig",
    "BoxConfiguration",
    "ClipsConfig",
    "ConfigError",
    "CornerRadiiConfig",
    "OpenFrontConfig",
    "OutputConfig",
    "OutputFormat",
    "SUPPORTED_VERSIONS",
    "config_to_box_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
