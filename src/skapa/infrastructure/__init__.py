"""Infrastructure layer - file export."""

from skapa.infrastructure.exporters import (
    ExporterRegistry,
    JsonSummaryExporter,
    StlBoxExporter,
)
from skapa.infrastructure.stl_exporter import StlExporter, StlMeshBuilder

__all__ = [
    "ExporterRegistry",
    "JsonSummaryExporter",
    "StlBoxExporter",
    "StlExporter",
    "StlMeshBuilder",
]
