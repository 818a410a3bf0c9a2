"""Exporter framework for generated boxes.

Registered exporters:
- json: Summary of the parameters used and the resulting mesh
- stl: Binary STL for slicing and printing

Usage:
    from skapa.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.create("stl", y_up=True)
    exporter.export(output, Path("box.stl"))
"""

from skapa.infrastructure.exporters.base import Exporter, ExporterRegistry
from skapa.infrastructure.exporters.json_summary import JsonSummaryExporter
from skapa.infrastructure.exporters.stl import StlBoxExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "JsonSummaryExporter",
    "StlBoxExporter",
]
