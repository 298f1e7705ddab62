"""Unit tests for locating and identifying record files."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from archview.domain.shared.record_file import ACCESSION_MODEL, read_projection, walk_json_files


class TestWalkJsonFiles:
    def test_sorted_and_recursive(self, tmp_path: Path, json_file):
        json_file(tmp_path / "b" / "2.json", {})
        json_file(tmp_path / "b" / "1.json", {})
        json_file(tmp_path / "a.json", {})
        (tmp_path / "notes.txt").write_text("skip me")

        paths = [p.relative_to(tmp_path).as_posix() for p in walk_json_files(tmp_path)]

        assert paths == ["a.json", "b/1.json", "b/2.json"]

    def test_missing_root_yields_nothing(self, tmp_path: Path):
        assert list(walk_json_files(tmp_path / "absent")) == []


class TestReadProjection:
    def test_identifies_accession(self, tmp_path: Path, json_file):
        path = json_file(
            tmp_path / "1.json",
            {"jsonmodel_type": "accession", "uri": "/a/1", "title": "Letters", "extents": []},
        )
        record = read_projection(path)
        assert record.jsonmodel_type == ACCESSION_MODEL
        assert (record.uri, record.title) == ("/a/1", "Letters")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(ValidationError):
            read_projection(path)
