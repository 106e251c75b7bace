"""Tests for the documentation exporters."""

from __future__ import annotations

import json

import pytest

from asmdoc.exporters import ExporterRegistry, HTMLExporter, JSONExporter
from asmdoc.exporters.base import SCHEMA_VERSION
from asmdoc.hierarchy.builder import HierarchyBuilder
from asmdoc.hierarchy.tree import HierarchyTree
from asmdoc.listing.kinds import LabelKind


@pytest.fixture
def sample_tree(sample_listing, sample_labels) -> HierarchyTree:
    return HierarchyBuilder.build_from_listing(sample_listing, sample_labels, title="Sample <Docs>")


class TestExporterRegistry:
    """Tests for exporter lookup."""

    def test_available(self):
        assert {"html", "json"} <= set(ExporterRegistry.available_exporters())

    def test_get_exporter(self):
        assert isinstance(ExporterRegistry.get_exporter("html"), HTMLExporter)
        assert isinstance(ExporterRegistry.get_exporter("json"), JSONExporter)
        assert ExporterRegistry.get_exporter("pdf") is None

    def test_unknown_format_raises(self, sample_tree, tmp_path):
        with pytest.raises(ValueError, match="Unknown export format"):
            ExporterRegistry.export(sample_tree, tmp_path, "pdf")


class TestHTMLExporter:
    """Tests for the HTML output."""

    def test_export_writes_files(self, sample_tree, tmp_path):
        path = ExporterRegistry.export(sample_tree, tmp_path / "out", "html")
        assert path == tmp_path / "out" / "index.html"
        assert path.exists()
        assert (tmp_path / "out" / "style.css").exists()

    def test_title_escaped(self, sample_tree):
        page = HTMLExporter().render(sample_tree)
        assert "<title>Sample &lt;Docs&gt;</title>" in page

    def test_sections_in_declaration_order(self, sample_tree):
        page = HTMLExporter().render(sample_tree)
        ids = [
            "label-text",
            "label-text-layer2",
            "label-text-layer2-print_string",
            "label-text-layer2-print_char",
            "label-text-ula",
            "label-text-ula-print_string",
            "label-COLOR",
            "label-msg",
            "label-missing",
            "label-missing-label",
        ]
        positions = [page.index(f'<section class="label" id="{anchor}">') for anchor in ids]
        assert positions == sorted(positions)

    def test_sections_balanced(self, sample_tree):
        page = HTMLExporter().render(sample_tree)
        assert page.count("<section") == sample_tree.total_entries
        assert page.count("</section>") == sample_tree.total_entries

    def test_nested_sections(self):
        tree = HierarchyTree()
        tree.root.insert("a.b", 1)
        page = HTMLExporter().render(tree)
        a = page.index('id="label-a"')
        b = page.index('id="label-a-b"')
        first_close = page.index("</section>")
        assert a < b < first_close

    def test_description_states(self):
        tree = HierarchyTree()
        tree.root.insert("ns.documented", 1).description = " Does <things>"
        tree.root.insert("ns.empty", 2).description = ""
        page = HTMLExporter().render(tree)
        assert '<pre class="description"> Does &lt;things&gt;</pre>' in page
        assert page.count('<div class="description empty"></div>') == 1
        # ns itself has no description element
        ns_section = page.split('id="label-ns"', 1)[1].split("<section", 1)[0]
        assert "description" not in ns_section

    def test_badges(self):
        tree = HierarchyTree()
        entry = tree.root.insert("start", 0)
        entry.kind = LabelKind.CODE
        entry.value = 0x8000
        page = HTMLExporter().render(tree)
        assert '<span class="kind kind-code">code</span>' in page
        assert '<span class="value">0x8000</span>' in page

    def test_toc_links(self, sample_tree):
        page = HTMLExporter().render(sample_tree)
        assert '<a href="#label-text-ula-print_string">print_string</a>' in page

    def test_empty_tree(self):
        page = HTMLExporter().render(HierarchyTree())
        assert "<section" not in page
        assert page.startswith("<!DOCTYPE html>")


class TestJSONExporter:
    """Tests for the JSON output."""

    def test_export(self, sample_tree, tmp_path):
        path = ExporterRegistry.export(sample_tree, tmp_path, "json")
        assert path.name == "index.json"

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == SCHEMA_VERSION
        assert "exported_at" in data

        doc = data["documentation"]
        assert doc["title"] == "Sample <Docs>"
        assert [e["label"] for e in doc["entries"]] == ["text", "COLOR", "msg", "missing"]

    def test_three_way_description(self, sample_tree):
        data = json.loads(JSONExporter().render(sample_tree))
        entries = {e["label"]: e for e in data["documentation"]["entries"]}
        assert entries["COLOR"]["description"] == " Screen colour."
        assert entries["msg"]["description"] == ""
        assert entries["text"]["description"] is None

    def test_statistics_included(self, sample_tree):
        data = json.loads(JSONExporter().render(sample_tree))
        stats = data["documentation"]["statistics"]
        assert stats["total_entries"] == 10
        assert stats["labelled_entries"] == 5
