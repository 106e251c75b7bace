"""
Hierarchy module - the label namespace of the documentation.

This module builds the dotted label tree and attaches the comment
descriptions found in the source.
"""

from asmdoc.hierarchy.builder import HierarchyBuilder
from asmdoc.hierarchy.descriptions import MAX_BLANK_LINES, extract_description
from asmdoc.hierarchy.tree import (
    ENTER,
    EXIT,
    HierarchyEntry,
    HierarchyTree,
    TraversalEvent,
)

__all__ = [
    "ENTER",
    "EXIT",
    "HierarchyBuilder",
    "HierarchyEntry",
    "HierarchyTree",
    "MAX_BLANK_LINES",
    "TraversalEvent",
    "extract_description",
]
