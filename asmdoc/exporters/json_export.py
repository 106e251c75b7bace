"""
JSON exporter.

Exports the label hierarchy as a single JSON file, suitable for
custom integrations and editors.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import ClassVar

from asmdoc import __version__
from asmdoc.exporters.base import SCHEMA_VERSION, BaseExporter, ExporterRegistry
from asmdoc.hierarchy.tree import HierarchyTree


@ExporterRegistry.register
class JSONExporter(BaseExporter):
    """Export the hierarchy as nested JSON objects."""

    EXPORTER_NAME: ClassVar[str] = "json"
    FILE_EXTENSION: ClassVar[str] = ".json"

    def render(self, tree: HierarchyTree) -> str:
        export_data = {
            "version": SCHEMA_VERSION,
            "exported_at": datetime.now().isoformat(),
            "exporter": f"asmdoc {__version__}",
            "documentation": tree.to_dict(),
        }
        return json.dumps(export_data, indent=2, ensure_ascii=False)
