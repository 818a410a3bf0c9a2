"""STL format exporter for generated boxes."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from skapa.infrastructure.exporters.base import ExporterRegistry
from skapa.infrastructure.stl_exporter import StlExporter, StlMeshBuilder

if TYPE_CHECKING:
    from skapa.application.dtos import BoxOutput


@ExporterRegistry.register("stl")
class StlBoxExporter:
    """Exports the box solid as a binary STL file.

    The file is Z-up unless `y_up` is set, see `StlMeshBuilder`.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
        media_type: "model/stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"
    media_type: ClassVar[str] = "model/stl"

    def __init__(
        self, mesh_builder: StlMeshBuilder | None = None, y_up: bool = False
    ) -> None:
        self._exporter = StlExporter(mesh_builder=mesh_builder or StlMeshBuilder(y_up=y_up))

    def export(self, output: BoxOutput, path: Path) -> None:
        self._exporter.export_to_file(self._solid(output), path)

    def export_bytes(self, output: BoxOutput) -> bytes:
        return self._exporter.export_bytes(self._solid(output), name=output.file_stem)

    @staticmethod
    def _solid(output: BoxOutput):
        if output.solid is None:
            raise ValueError("Cannot export a box that failed to generate")
        return output.solid


__all__ = ["StlBoxExporter", "StlExporter", "StlMeshBuilder"]
