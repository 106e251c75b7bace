"""
Hierarchy tree data structures.

Exported labels form a dot-separated namespace, e.g.
text.layer2.print_string, text.ula.print_string, text.layer2.print_char
become:

    text - layer2 - print_string
      |          +- print_char
      +- ula - print_string
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from asmdoc.hierarchy.descriptions import MAX_BLANK_LINES, extract_description
from asmdoc.listing.kinds import LabelKind
from asmdoc.listing.listfile import NO_LINE

ENTER = "enter"
EXIT = "exit"

EntryHandler = Callable[[str, "HierarchyEntry"], None]


class TraversalEvent(NamedTuple):
    """One step of a pre-order walk over the hierarchy."""

    kind: str
    label: str
    entry: HierarchyEntry


@dataclass
class HierarchyEntry:
    """
    A node in the label hierarchy.

    line_number is NO_LINE for pure namespace nodes (e.g. a module that is
    never exported itself). elements keeps the order in which segments were
    first inserted, which is the order shown in the documentation.
    """

    line_number: int = NO_LINE
    elements: dict[str, HierarchyEntry] = field(default_factory=dict)
    description: str | None = None

    # Metadata filled in by the builder
    kind: LabelKind | None = None
    value: int | None = None

    @property
    def has_line(self) -> bool:
        return self.line_number != NO_LINE

    @property
    def is_leaf(self) -> bool:
        return not self.elements

    @property
    def descendant_count(self) -> int:
        """Count all entries below this one."""
        count = len(self.elements)
        for entry in self.elements.values():
            count += entry.descendant_count
        return count

    def get_entry(self, label: str) -> HierarchyEntry | None:
        """
        Search the hierarchy below this entry for a dotted label.

        Args:
            label: E.g. 'text.ula.print_string'

        Returns:
            The matching entry, or None if any segment does not exist.
        """
        first, sep, remaining = label.partition(".")
        entry = self.elements.get(first)
        if entry is None or not sep:
            return entry
        return entry.get_entry(remaining)

    def insert(self, label: str, line_number: int) -> HierarchyEntry:
        """
        Insert a dotted label, creating intermediate entries as needed.

        Intermediate entries keep their line number; only the entry at the
        end of the path gets line_number. Existing keys keep their position.

        Returns:
            The entry for the full label.
        """
        entry = self
        for segment in label.split("."):
            child = entry.elements.get(segment)
            if child is None:
                child = HierarchyEntry()
                entry.elements[segment] = child
            entry = child
        entry.line_number = line_number
        return entry

    def set_descriptions(
        self,
        lines: list[str],
        line_text: Callable[[str], str] | None = None,
        max_blank_lines: int = MAX_BLANK_LINES,
    ) -> None:
        """
        Extract the description of this entry and of all entries below it.

        The comment lines above each label are used, see extract_description.

        Args:
            lines: All lines of the file.
            line_text: Maps a raw line to its logical source text.
            max_blank_lines: Blank lines tolerated between comment and label.
        """
        self.description = extract_description(
            self.line_number, lines, line_text, max_blank_lines
        )
        for entry in self.elements.values():
            entry.set_descriptions(lines, line_text, max_blank_lines)

    def walk(self, prefix: str = "") -> Iterator[TraversalEvent]:
        """
        Walk all entries below this one in insertion order.

        Yields an enter event before an entry's children and a matching exit
        event after them. This entry itself is not reported.
        """
        for segment, entry in self.elements.items():
            label = f"{prefix}.{segment}" if prefix else segment
            yield TraversalEvent(ENTER, label, entry)
            yield from entry.walk(label)
            yield TraversalEvent(EXIT, label, entry)

    def iterate(
        self,
        enter_handler: EntryHandler,
        exit_handler: EntryHandler | None = None,
        prefix: str = "",
    ) -> None:
        """
        Call the handlers for every entry below this one.

        Args:
            enter_handler: Called with (label, entry) when an entry is entered.
            exit_handler: Called with (label, entry) after its children.
            prefix: Label of this entry. Used during recursion.
        """
        for event in self.walk(prefix):
            if event.kind == ENTER:
                enter_handler(event.label, event.entry)
            elif exit_handler is not None:
                exit_handler(event.label, event.entry)

    def to_dict(self, label: str = "") -> dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            "label": label,
            "line_number": self.line_number,
            "description": self.description,
            "kind": self.kind.value if self.kind is not None else None,
            "value": self.value,
            "children": [
                entry.to_dict(f"{label}.{segment}" if label else segment)
                for segment, entry in self.elements.items()
            ],
        }

    def __repr__(self) -> str:
        return (
            f"<HierarchyEntry line={self.line_number} "
            f"elements={list(self.elements)}>"
        )


@dataclass
class HierarchyTree:
    """
    The label hierarchy of one documentation run.

    Wraps the root entry, which always has NO_LINE and is never rendered.
    """

    root: HierarchyEntry = field(default_factory=HierarchyEntry)
    title: str = "Assembler Documentation"
    source_name: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def get_entry(self, label: str) -> HierarchyEntry | None:
        return self.root.get_entry(label)

    def walk(self) -> Iterator[TraversalEvent]:
        return self.root.walk()

    def iterate(
        self,
        enter_handler: EntryHandler,
        exit_handler: EntryHandler | None = None,
    ) -> None:
        self.root.iterate(enter_handler, exit_handler)

    @property
    def total_entries(self) -> int:
        return self.root.descendant_count

    @property
    def max_depth(self) -> int:
        """Maximum number of segments of any label in the tree."""
        depth = 0
        for event in self.walk():
            if event.kind == ENTER:
                depth = max(depth, event.label.count(".") + 1)
        return depth

    def get_statistics(self) -> dict[str, Any]:
        """Get tree statistics for reports.

        Exported labels without a definition (see ``unresolved_labels`` in
        the metadata) have no line number but are counted as unresolved,
        not as namespace entries.
        """
        unresolved_labels = set(self.metadata.get("unresolved_labels", []))
        entered = [event for event in self.walk() if event.kind == ENTER]
        entries = [event.entry for event in entered]
        labelled = [e for e in entries if e.has_line]
        documented = [e for e in labelled if e.description]
        unresolved = [
            event.entry
            for event in entered
            if not event.entry.has_line and event.label in unresolved_labels
        ]

        kinds: dict[str, int] = {}
        for entry in entries:
            if entry.kind is not None:
                kinds[entry.kind.value] = kinds.get(entry.kind.value, 0) + 1

        return {
            "total_entries": len(entries),
            "labelled_entries": len(labelled),
            "namespace_entries": len(entries) - len(labelled) - len(unresolved),
            "unresolved_entries": len(unresolved),
            "documented_entries": len(documented),
            "undocumented_entries": len(labelled) - len(documented),
            "max_depth": self.max_depth,
            "kind_distribution": kinds,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert entire tree to dictionary."""
        return {
            "title": self.title,
            "source_name": self.source_name,
            "metadata": self.metadata,
            "statistics": self.get_statistics(),
            "entries": self.root.to_dict()["children"],
        }

    def __repr__(self) -> str:
        return (
            f"<HierarchyTree title={self.title!r} "
            f"entries={self.total_entries} "
            f"depth={self.max_depth}>"
        )
