"""Documentation exporters."""

from asmdoc.exporters.base import BaseExporter, ExporterRegistry
from asmdoc.exporters.html_export import HTMLExporter
from asmdoc.exporters.json_export import JSONExporter

__all__ = [
    "BaseExporter",
    "ExporterRegistry",
    "HTMLExporter",
    "JSONExporter",
]
