"""Tests for archview CLI commands: index, nav, view, config."""

import json
from pathlib import Path

import pytest
import yaml


class TestIndexCommand:
    def test_prints_json_keyed_by_uri(self, datasets_root: Path, capsys) -> None:
        from archview.cli.commands.index import index

        index(root=datasets_root)

        data = json.loads(capsys.readouterr().out)
        assert list(data) == [
            "/repositories/2/accessions/2",
            "/repositories/2/accessions/3",
            "/repositories/2/accessions/1",
        ]
        first = data["/repositories/2/accessions/2"]
        assert "prev_uri" not in first
        assert first["next_uri"] == "/repositories/2/accessions/3"

    def test_html_one_fragment_per_line(self, datasets_root: Path, capsys) -> None:
        from archview.cli.commands.index import index

        index(root=datasets_root, html=True)

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith('<span class="this-item"')
        assert lines[2].endswith("Richter papers</span>")

    def test_writes_output_file(self, datasets_root: Path, tmp_path: Path) -> None:
        from archview.cli.commands.index import index

        target = tmp_path / "out" / "titles.json"
        index(root=datasets_root, output=target)

        assert len(json.loads(target.read_text())) == 3

    def test_root_from_environment(
        self, datasets_root: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        from archview.cli.commands.index import index

        monkeypatch.setenv("ARCHVIEW_DATASETS__ROOT", str(datasets_root))
        index()

        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_empty_root_exits_with_error(self, tmp_path: Path, capsys) -> None:
        from archview.cli.commands.index import index

        with pytest.raises(SystemExit) as exc_info:
            index(root=tmp_path)

        assert exc_info.value.code == 1
        assert "no accession records found" in capsys.readouterr().err


class TestNavCommand:
    def test_prints_fragment(self, datasets_root: Path, capsys) -> None:
        from archview.cli.commands.nav import nav

        nav("/repositories/2/accessions/1", root=datasets_root)

        out = capsys.readouterr().out.strip()
        assert out.startswith('<a class="prev-item" href="/repositories/2/accessions/3"')
        assert "next-item" not in out

    def test_unknown_uri_exits(self, datasets_root: Path) -> None:
        from archview.cli.commands.nav import nav

        with pytest.raises(SystemExit):
            nav("/repositories/2/accessions/404", root=datasets_root)


class TestViewCommand:
    def test_prints_normalized_view(self, datasets_root: Path, capsys) -> None:
        from archview.cli.commands.view import view

        view(datasets_root / "repositories" / "2" / "accessions" / "1.json", root=datasets_root)

        data = json.loads(capsys.readouterr().out)
        assert data["subjects"] == ["Seismology", "Caltech History"]
        assert data["digital_objects"][0]["publish"] is True
        assert data["created"] == "2015-01-01T00:00:00Z"

    def test_directory_prints_all(self, datasets_root: Path, capsys) -> None:
        from archview.cli.commands.view import view

        view(datasets_root / "repositories", root=datasets_root)

        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_missing_subjects_directory_exits(self, tmp_path: Path, json_file) -> None:
        from archview.cli.commands.view import view

        accession = json_file(tmp_path / "a.json", {"jsonmodel_type": "accession", "uri": "/a"})
        with pytest.raises(SystemExit):
            view(accession, root=tmp_path)


class TestConfigCommands:
    def test_init_writes_template(self, tmp_path: Path) -> None:
        from archview.cli.commands.config import init

        target = tmp_path / "archview.yaml"
        init(target)

        assert yaml.safe_load(target.read_text())["datasets"]["subjects"] == "subjects"

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        from archview.cli.commands.config import init

        target = tmp_path / "archview.yaml"
        target.write_text("keep: me\n")
        with pytest.raises(SystemExit):
            init(target)
        assert target.read_text() == "keep: me\n"

    def test_show_prints_resolved_config(
        self, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        from archview.cli.commands.config import show

        monkeypatch.setenv("ARCHVIEW_DATASETS__ROOT", "/srv/aspace")
        show()

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["datasets"]["root"] == "/srv/aspace"


class TestApp:
    def test_commands_registered(self) -> None:
        from archview.cli.main import app

        for name in ("index", "nav", "view", "config"):
            assert app[name] is not None
