"""
HTML exporter.

Writes an index.html with a nested table of contents and one section per
label, plus the style sheet. Both are produced from a single walk over
the hierarchy so the declaration order is kept.
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import ClassVar

from asmdoc.exporters.base import BaseExporter, ExporterRegistry
from asmdoc.hierarchy.tree import ENTER, HierarchyEntry, HierarchyTree

STYLE_SHEET = """\
body { font-family: sans-serif; margin: 2em; color: #222; }
nav ul { list-style: none; padding-left: 1.2em; }
section.label { margin-left: 1.2em; border-left: 1px solid #ccc; padding-left: 0.8em; }
h2.label-name { font-family: monospace; font-size: 1.1em; }
h2.namespace { color: #666; }
pre.description { background: #f6f6f6; padding: 0.5em; }
div.description.empty { display: none; }
span.kind { font-size: 0.75em; border-radius: 3px; padding: 0 0.4em; margin-left: 0.5em; }
span.kind-code { background: #d9ead3; }
span.kind-data { background: #cfe2f3; }
span.kind-constant { background: #fce5cd; }
span.kind-unknown { background: #eee; }
span.value { font-family: monospace; color: #666; margin-left: 0.5em; }
"""


def anchor_for(label: str) -> str:
    return "label-" + label.replace(".", "-")


@ExporterRegistry.register
class HTMLExporter(BaseExporter):
    """Export the hierarchy as a static HTML page."""

    EXPORTER_NAME: ClassVar[str] = "html"
    FILE_EXTENSION: ClassVar[str] = ".html"
    STYLE_FILE: ClassVar[str] = "style.css"

    def export(self, tree: HierarchyTree, output_dir: Path) -> Path:
        path = super().export(tree, output_dir)
        (path.parent / self.STYLE_FILE).write_text(STYLE_SHEET, encoding="utf-8")
        return path

    def render(self, tree: HierarchyTree) -> str:
        toc: list[str] = []
        body: list[str] = []

        for event in tree.walk():
            if event.kind == ENTER:
                toc.append(self._toc_enter(event.label, event.entry))
                body.append(self._section_enter(event.label, event.entry))
            else:
                toc.append(self._toc_exit(event.entry))
                body.append("</section>")

        title = html.escape(tree.title)
        source = (
            f'<p class="source">Source: {html.escape(tree.source_name)}</p>'
            if tree.source_name
            else ""
        )
        return "\n".join(
            [
                "<!DOCTYPE html>",
                "<html>",
                "<head>",
                '<meta charset="utf-8">',
                f"<title>{title}</title>",
                f'<link rel="stylesheet" href="{self.STYLE_FILE}">',
                "</head>",
                "<body>",
                f"<h1>{title}</h1>",
                source,
                '<nav class="toc">',
                "<ul>",
                *toc,
                "</ul>",
                "</nav>",
                "<main>",
                *body,
                "</main>",
                "</body>",
                "</html>",
                "",
            ]
        )

    @staticmethod
    def _toc_enter(label: str, entry: HierarchyEntry) -> str:
        link = f'<a href="#{anchor_for(label)}">{html.escape(label.rsplit(".", 1)[-1])}</a>'
        if entry.is_leaf:
            return f"<li>{link}"
        return f"<li>{link}\n<ul>"

    @staticmethod
    def _toc_exit(entry: HierarchyEntry) -> str:
        if entry.is_leaf:
            return "</li>"
        return "</ul>\n</li>"

    @staticmethod
    def _section_enter(label: str, entry: HierarchyEntry) -> str:
        heading_class = "label-name" if entry.has_line else "label-name namespace"
        parts = [
            f'<section class="label" id="{anchor_for(label)}">',
            f'<h2 class="{heading_class}">{html.escape(label)}'
            + HTMLExporter._badges(entry)
            + "</h2>",
        ]

        # None: nothing to show. '': the label has no comment.
        if entry.description is not None:
            if entry.description:
                parts.append(f'<pre class="description">{html.escape(entry.description)}</pre>')
            else:
                parts.append('<div class="description empty"></div>')

        return "\n".join(parts)

    @staticmethod
    def _badges(entry: HierarchyEntry) -> str:
        badges = ""
        if entry.kind is not None:
            badges += f'<span class="kind kind-{entry.kind.value}">{entry.kind.value}</span>'
        if entry.value is not None:
            value = f"0x{entry.value:04X}" if entry.value >= 0 else str(entry.value)
            badges += f'<span class="value">{value}</span>'
        return badges
