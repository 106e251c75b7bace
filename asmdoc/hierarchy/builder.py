"""
Hierarchy tree builder.

Builds the label hierarchy from the exported labels and the list file.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from asmdoc.hierarchy.descriptions import MAX_BLANK_LINES
from asmdoc.hierarchy.tree import HierarchyTree
from asmdoc.listing.kinds import DEFAULT_SCAN_LINES, classify_label
from asmdoc.listing.labels import ExportedLabel, LabelLocator
from asmdoc.listing.listfile import NO_LINE, ListFile

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """
    Builds hierarchy trees from labels.

    Labels are inserted in the order given, so the documentation follows
    the declaration order of the EXPORTs.
    """

    @staticmethod
    def build(
        labels: Iterable[tuple[str, int]],
        lines: list[str],
        line_text: Callable[[str], str] | None = None,
        max_blank_lines: int = MAX_BLANK_LINES,
        title: str = "Assembler Documentation",
        metadata: dict[str, Any] | None = None,
    ) -> HierarchyTree:
        """Build a hierarchy tree from (label, line number) pairs.

        Strategy:
        1. Insert every label path into an empty root, in order
        2. Extract the descriptions for all entries with a line number

        Args:
            labels: Dotted label paths with their 0-based line numbers.
            lines: All lines of the file the line numbers refer to.
            line_text: Maps a raw line to its logical source text.
            max_blank_lines: Blank lines tolerated between comment and label.
            title: Title of the documentation.
            metadata: Optional metadata for the tree.

        Returns:
            HierarchyTree with descriptions set.
        """
        tree = HierarchyTree(title=title, metadata=dict(metadata or {}))

        for label, line_number in labels:
            tree.root.insert(label, line_number)

        tree.root.set_descriptions(lines, line_text, max_blank_lines)
        return tree

    @staticmethod
    def build_from_listing(
        listing: ListFile,
        exported: list[ExportedLabel],
        title: str = "Assembler Documentation",
        max_blank_lines: int = MAX_BLANK_LINES,
        classify_kinds: bool = True,
        kind_scan_lines: int = DEFAULT_SCAN_LINES,
    ) -> HierarchyTree:
        """Build the hierarchy of a list file and its exported labels.

        Each exported label is located in the list file. Labels that are
        not defined in the list file are kept, with NO_LINE.

        Args:
            listing: The list file.
            exported: Exported labels in declaration order.
            title: Title of the documentation.
            max_blank_lines: Blank lines tolerated between comment and label.
            classify_kinds: If True, set the kind of every labelled entry.
            kind_scan_lines: Lines checked after a label on its own line.

        Returns:
            HierarchyTree with descriptions, kinds and values.
        """
        logical = listing.logical_lines()
        locator = LabelLocator(logical)

        pairs: list[tuple[str, int]] = []
        unresolved: list[str] = []
        for label in exported:
            line_number = locator.locate(label.name)
            if line_number == NO_LINE:
                unresolved.append(label.name)
            pairs.append((label.name, line_number))

        if unresolved:
            logger.warning(
                "%d exported labels not found in %s: %s",
                len(unresolved),
                listing.name or "list file",
                ", ".join(unresolved),
            )

        tree = HierarchyBuilder.build(
            pairs,
            listing.lines,
            line_text=listing.main_line,
            max_blank_lines=max_blank_lines,
            title=title,
            metadata={"unresolved_labels": unresolved},
        )
        tree.source_name = listing.name

        for label in exported:
            entry = tree.get_entry(label.name)
            if entry is None:
                continue
            entry.value = label.value
            if classify_kinds:
                entry.kind = classify_label(entry.line_number, logical, kind_scan_lines)

        logger.info(
            "Built hierarchy with %d entries from %d labels",
            tree.total_entries,
            len(exported),
        )
        return tree
