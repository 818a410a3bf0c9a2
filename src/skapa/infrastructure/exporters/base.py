"""Exporter protocol and format registry.

Exporters turn a generated `BoxOutput` into a file format. They register
under a format name, which is what the CLI `--format` option and the
`/export/{format}` endpoint accept.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from skapa.application.dtos import BoxOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """What every exporter provides.

    Attributes:
        format_name: Registry key, e.g. "stl".
        file_extension: Extension without the dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    def export(self, output: BoxOutput, path: Path) -> None: ...

    def export_bytes(self, output: BoxOutput) -> bytes: ...


class ExporterRegistry:
    """Format name to exporter class lookup.

    Example:
        @ExporterRegistry.register("stl")
        class StlBoxExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator adding an exporter under `format_name`."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Exporter {exporter_class.__name__} replaces "
                    f"{previous.__name__} for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for a format.

        Raises:
            KeyError: If the format is unknown; the message lists the known ones.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def create(cls, format_name: str, **options: Any) -> Exporter:
        """An exporter instance for a format.

        `options` go to the exporter's constructor, e.g. `y_up=True` for STL.
        """
        return cls.get(format_name)(**options)

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters
