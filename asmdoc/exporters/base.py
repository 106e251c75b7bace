"""
Base exporter class and registry.

All exporters inherit from BaseExporter and register themselves
with the ExporterRegistry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from asmdoc.hierarchy.tree import HierarchyTree

SCHEMA_VERSION = "1.0"


class BaseExporter(ABC):
    """
    Abstract base class for documentation exporters.

    Exporters turn a hierarchy tree into files in an output directory.
    """

    EXPORTER_NAME: ClassVar[str] = "base"
    FILE_EXTENSION: ClassVar[str] = ""

    @abstractmethod
    def render(self, tree: HierarchyTree) -> str:
        """Render the tree as the content of the main output file."""

    def export(self, tree: HierarchyTree, output_dir: Path) -> Path:
        """
        Write the documentation into output_dir.

        Args:
            tree: Hierarchy with descriptions set
            output_dir: Directory to write to, created if missing

        Returns:
            Path to the main output file
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / f"index{self.FILE_EXTENSION}"
        path.write_text(self.render(tree), encoding="utf-8")
        return path


class ExporterRegistry:
    """Registry of available exporters."""

    _exporters: ClassVar[dict[str, type[BaseExporter]]] = {}

    @classmethod
    def register(cls, exporter_class: type[BaseExporter]) -> type[BaseExporter]:
        """Register an exporter class."""
        cls._exporters[exporter_class.EXPORTER_NAME] = exporter_class
        return exporter_class

    @classmethod
    def get_exporter(cls, name: str) -> BaseExporter | None:
        """Get an exporter by name."""
        exporter_class = cls._exporters.get(name)
        if exporter_class:
            return exporter_class()
        return None

    @classmethod
    def available_exporters(cls) -> list[str]:
        """Get list of available exporter names."""
        return list(cls._exporters.keys())

    @classmethod
    def _require(cls, format: str) -> BaseExporter:
        exporter = cls.get_exporter(format)
        if exporter is None:
            available = ", ".join(cls.available_exporters())
            raise ValueError(f"Unknown export format: {format}. Available: {available}")
        return exporter

    @classmethod
    def render(cls, tree: HierarchyTree, format: str) -> str:
        """Render a tree using the specified format."""
        return cls._require(format).render(tree)

    @classmethod
    def export(cls, tree: HierarchyTree, output_dir: Path, format: str) -> Path:
        """Export a tree using the specified format."""
        return cls._require(format).export(tree, output_dir)
