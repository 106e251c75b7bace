"""Tests for DocConfig."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from asmdoc.config import DocConfig
from asmdoc.listing.base import ListingError


class TestDocConfig:
    """Tests for configuration defaults, validation and loading."""

    def test_defaults(self):
        config = DocConfig()
        assert config.format == "html"
        assert config.source_column == 24
        assert config.max_blank_lines == 2
        assert config.output_dir == Path("docs")
        config.validate()

    @pytest.mark.parametrize(
        "field_name,value",
        [("source_column", -1), ("max_blank_lines", -1), ("kind_scan_lines", -2), ("format", "")],
    )
    def test_validate_rejects(self, field_name, value):
        config = DocConfig()
        setattr(config, field_name, value)
        with pytest.raises(ValueError):
            config.validate()

    def test_dict_round_trip(self):
        config = DocConfig(list_path=Path("a.lis"), labels_path=Path("a.labels"), title="T")
        assert DocConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        config = DocConfig.from_dict({})
        assert config == DocConfig()

    def test_from_file_resolves_relative_paths(self, tmp_path):
        path = tmp_path / "asmdoc.json"
        path.write_text(
            json.dumps({"list_path": "src/main.lis", "labels_path": "/abs/main.labels", "format": "json"}),
            encoding="utf-8",
        )
        config = DocConfig.from_file(path)
        assert config.list_path == tmp_path / "src" / "main.lis"
        assert config.labels_path == Path("/abs/main.labels")
        assert config.output_dir == tmp_path / "docs"
        assert config.format == "json"

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ListingError, match="not found"):
            DocConfig.from_file(tmp_path / "missing.json")

    def test_from_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ListingError, match="Invalid config"):
            DocConfig.from_file(path)

    def test_from_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ListingError):
            DocConfig.from_file(path)
