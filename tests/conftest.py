"""Global test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import logfire
import pytest

logfire.configure(send_to_logfire=False, console=False)

SUBJECTS = {
    "1.json": {"jsonmodel_type": "subject", "uri": "/subjects/1", "title": "Seismology"},
    "2.json": {"jsonmodel_type": "subject", "uri": "/subjects/2", "title": "Caltech History"},
}

DIGITAL_OBJECTS = {
    "1.json": {
        "jsonmodel_type": "digital_object",
        "uri": "/repositories/2/digital_objects/1",
        "title": "Seismograph photograph",
        "publish": True,
        "file_versions": [
            {"file_uri": "https://example.org/files/seismograph.jpg"},
            {"file_uri": ""},
            {"file_uri": "https://example.org/files/seismograph.tif"},
        ],
    },
}

ACCESSIONS = {
    "1.json": {
        "jsonmodel_type": "accession",
        "uri": "/repositories/2/accessions/1",
        "title": "Richter papers",
        "content_description": "Notebooks and correspondence",
        "condition_description": "Good",
        "accession_date": "1985-06-01",
        "created_by": "admin",
        "create_time": "2015-01-01T00:00:00Z",
        "last_modified_by": "archivist",
        "user_mtime": "2016-02-02T00:00:00Z",
        "extents": [{"physical_details": "3 boxes"}],
        "instances": [
            {"instance_type": "digital_object",
             "digital_object": {"ref": "/repositories/2/digital_objects/1"}},
        ],
        "subjects": [{"ref": "/subjects/1"}, {"ref": "/subjects/2"}],
    },
    "2.json": {
        "jsonmodel_type": "accession",
        "uri": "/repositories/2/accessions/2",
        "title": "Gutenberg collection",
    },
    "3.json": {
        "jsonmodel_type": "accession",
        "uri": "/repositories/2/accessions/3",
        "title": "Millikan lab notes",
    },
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def json_file() -> Callable[[Path, Any], Path]:
    """Write a JSON document, creating parent directories."""
    return write_json


@pytest.fixture
def datasets_root(tmp_path: Path) -> Path:
    """A small ArchivesSpace export: subjects, digital objects and accessions."""
    root = tmp_path / "datasets"
    for name, data in SUBJECTS.items():
        write_json(root / "subjects" / name, data)
    for name, data in DIGITAL_OBJECTS.items():
        write_json(root / "digital_objects" / name, data)
    for name, data in ACCESSIONS.items():
        write_json(root / "repositories" / "2" / "accessions" / name, data)
    return root
