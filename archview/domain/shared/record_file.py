"""Record files on disk: finding them and telling what kind they are."""

import os
from collections.abc import Iterator
from pathlib import Path

from archview.domain.shared.model.value import RecordModel, Text

ACCESSION_MODEL = "accession"


class RecordProjection(RecordModel):
    """The few fields of any record needed to identify it."""

    title: Text = ""
    uri: Text = ""
    jsonmodel_type: Text = ""


def walk_json_files(root: Path) -> Iterator[Path]:
    """Yield every *.json file under root, directories and files in name order."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(".json"):
                yield Path(dirpath) / name


def read_projection(path: Path) -> RecordProjection:
    """Read a record file's projection. Raises OSError or ValidationError."""
    return RecordProjection.model_validate_json(path.read_bytes())
