"""
Documentation pipeline.

list file + labels file -> hierarchy tree -> exported documentation
"""

from __future__ import annotations

import logging
from pathlib import Path

from asmdoc.config import DocConfig
from asmdoc.exporters import ExporterRegistry
from asmdoc.hierarchy.builder import HierarchyBuilder
from asmdoc.hierarchy.tree import HierarchyTree
from asmdoc.listing.labels import ExportedLabel, read_labels_file
from asmdoc.listing.listfile import ListFile

logger = logging.getLogger(__name__)


def build_documentation(
    listing: ListFile,
    labels: list[ExportedLabel],
    config: DocConfig | None = None,
) -> HierarchyTree:
    """Build the documented hierarchy from already loaded inputs."""
    config = config or DocConfig()
    config.validate()
    return HierarchyBuilder.build_from_listing(
        listing,
        labels,
        title=config.title,
        max_blank_lines=config.max_blank_lines,
        classify_kinds=config.classify_kinds,
        kind_scan_lines=config.kind_scan_lines,
    )


def generate_documentation(config: DocConfig) -> Path:
    """
    Read the input files, build the hierarchy and export it.

    Returns:
        Path to the main output file.

    Raises:
        ValueError: If the configuration is incomplete or invalid.
        ListingError: If an input file cannot be read.
    """
    config.validate()
    if config.list_path is None:
        raise ValueError("No list file given")
    if config.labels_path is None:
        raise ValueError("No labels file given")

    listing = ListFile.from_path(config.list_path, source_column=config.source_column)
    logger.info("Read %d lines from %s", len(listing), config.list_path)
    labels = read_labels_file(config.labels_path)

    tree = build_documentation(listing, labels, config)
    path = ExporterRegistry.export(tree, config.output_dir, config.format)

    stats = tree.get_statistics()
    logger.info(
        "Wrote %s (%d entries, %d documented)",
        path,
        stats["total_entries"],
        stats["documented_entries"],
    )
    return path
