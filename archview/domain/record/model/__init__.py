"""Record domain model."""

from archview.domain.record.model.accession import Accession, Extent, Instance, RecordRef
from archview.domain.record.model.digital_object import DigitalObject, FileVersion
from archview.domain.record.model.subject import Subject
from archview.domain.record.model.view import NormalizedAccessionView, NormalizedDigitalObjectView

__all__ = [
    "Accession",
    "DigitalObject",
    "Extent",
    "FileVersion",
    "Instance",
    "NormalizedAccessionView",
    "NormalizedDigitalObjectView",
    "RecordRef",
    "Subject",
]
