"""Load directories of ArchivesSpace JSON exports into memory.

Each record directory holds one JSON document per record. Every regular
file in the directory is parsed; subdirectories are ignored. Any unreadable
or malformed file fails the whole call, there is no partial result.
"""

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from archview.config import DatasetsConfig
from archview.domain.record.model import Accession, DigitalObject, Subject
from archview.domain.record.port.store import RecordStore
from archview.domain.shared.error import RecordIOError, RecordParseError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _record_files(dname: Path) -> list[Path]:
    try:
        entries = sorted(dname.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise RecordIOError(dname, e) from e
    return [p for p in entries if not p.is_dir()]


def read_record(fname: Path, model: type[M]) -> M:
    """Parse a single record file as `model`."""
    try:
        src = fname.read_bytes()
    except OSError as e:
        raise RecordIOError(fname, e) from e
    try:
        return model.model_validate_json(src)
    except ValidationError as e:
        raise RecordParseError(fname, e) from e


def _load_list(dname: str | Path, model: type[M]) -> list[M]:
    dname = Path(dname)
    records = [read_record(fname, model) for fname in _record_files(dname)]
    logger.debug("Loaded %d %s records from %s", len(records), model.__name__, dname)
    return records


def load_subjects(dname: str | Path) -> list[Subject]:
    """Read every subject in `dname`, in file name order."""
    return _load_list(dname, Subject)


def load_subjects_by_uri(dname: str | Path) -> dict[str, Subject]:
    """Read every subject in `dname`, keyed by URI. A repeated URI keeps the last file."""
    return {subject.uri: subject for subject in load_subjects(dname)}


def load_digital_objects(dname: str | Path) -> list[DigitalObject]:
    """Read every digital object in `dname`, in file name order."""
    return _load_list(dname, DigitalObject)


def load_digital_objects_by_uri(dname: str | Path) -> dict[str, DigitalObject]:
    """Read every digital object in `dname`, keyed by URI."""
    return {obj.uri: obj for obj in load_digital_objects(dname)}


def load_accession(fname: str | Path) -> Accession:
    """Read a single accession record file."""
    return read_record(Path(fname), Accession)


class JsonRecordStore(RecordStore):
    """RecordStore over a datasets directory laid out as in DatasetsConfig."""

    def __init__(self, datasets: DatasetsConfig) -> None:
        self.datasets = datasets

    def subjects_by_uri(self) -> dict[str, Subject]:
        return load_subjects_by_uri(self.datasets.subjects_dir)

    def digital_objects_by_uri(self) -> dict[str, DigitalObject]:
        return load_digital_objects_by_uri(self.datasets.digital_objects_dir)

    def accession(self, path: Path) -> Accession:
        return load_accession(path)
