"""RecordViewService - normalized accession views backed by a RecordStore."""

import logging
from pathlib import Path

import logfire
from pydantic import ValidationError

from archview.domain.record.model import DigitalObject, NormalizedAccessionView, Subject
from archview.domain.record.port.store import RecordStore
from archview.domain.record.service.normalize import normalize_accession
from archview.domain.shared.record_file import ACCESSION_MODEL, read_projection, walk_json_files
from archview.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RecordViewService(Service):
    """Resolves accessions against the subjects and digital objects in a store.

    Lookup maps are loaded once per call and dropped afterwards; views keep
    no reference to them.
    """

    store: RecordStore

    def _lookups(self) -> tuple[dict[str, Subject], dict[str, DigitalObject]]:
        subjects = self.store.subjects_by_uri()
        digital_objects = self.store.digital_objects_by_uri()
        logger.debug(
            "Loaded %d subjects and %d digital objects", len(subjects), len(digital_objects)
        )
        return subjects, digital_objects

    def view(self, accession_file: Path) -> NormalizedAccessionView:
        """Normalized view of the accession stored in accession_file."""
        with logfire.span("NormalizeAccession", path=str(accession_file)):
            accession = self.store.accession(accession_file)
            subjects, digital_objects = self._lookups()
            return normalize_accession(accession, subjects, digital_objects)

    def view_all(self, root: Path) -> list[NormalizedAccessionView]:
        """Normalized views of every accession file under root, in path order.

        Files that are not accession records, or cannot be identified as
        one, are skipped.
        """
        with logfire.span("NormalizeAccessions", root=str(root)):
            subjects, digital_objects = self._lookups()
            views = []
            for path in walk_json_files(root):
                try:
                    kind = read_projection(path).jsonmodel_type
                except (OSError, ValidationError) as e:
                    logger.warning("Skipping %s, %s", path, e)
                    continue
                if kind != ACCESSION_MODEL:
                    continue
                accession = self.store.accession(path)
                views.append(normalize_accession(accession, subjects, digital_objects))
            logger.info("Normalized %d accessions under %s", len(views), root)
            return views
