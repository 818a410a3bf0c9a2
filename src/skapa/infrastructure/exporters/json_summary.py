"""JSON summary exporter: parameters used, clip count and mesh statistics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from skapa.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from skapa.application.dtos import BoxOutput


@ExporterRegistry.register("json")
class JsonSummaryExporter:
    """Writes `BoxOutput.summary()` as indented JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_string(self, output: BoxOutput) -> str:
        return json.dumps(output.summary(), indent=self.indent)

    def export(self, output: BoxOutput, path: Path) -> None:
        Path(path).write_text(self.export_string(output) + "\n", encoding="utf-8")

    def export_bytes(self, output: BoxOutput) -> bytes:
        return self.export_string(output).encode("utf-8")
