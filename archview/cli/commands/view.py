"""Normalized view command."""

import json
from pathlib import Path

import cyclopts

from archview.cli.util import datasets_for, fail
from archview.domain.record.service.view import RecordViewService
from archview.domain.shared.error import ArchviewError
from archview.infrastructure.persistence.adapter.loader import JsonRecordStore

app = cyclopts.App(name="view", help="Show normalized accession views")


@app.default
def view(path: Path, /, *, root: Path | None = None) -> None:
    """Print the normalized view of an accession as JSON.

    Subjects and digital objects are resolved from the datasets root.

    Args:
        path: Accession JSON file, or a directory to normalize every accession under it.
        root: Datasets root holding subjects/ and digital_objects/.
    """
    service = RecordViewService(store=JsonRecordStore(datasets_for(root)))
    try:
        if path.is_dir():
            views = service.view_all(path)
            payload = [v.model_dump(mode="json") for v in views]
        else:
            payload = service.view(path).model_dump(mode="json")
    except ArchviewError as e:
        fail(e)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
