"""Pure reference resolution for accession views.

The join is best-effort: a reference that does not resolve in the supplied
maps is dropped from the view, never raised. Sub-collections exported from
ArchivesSpace are routinely incomplete.
"""

from collections.abc import Mapping

from archview.domain.record.model.accession import Accession
from archview.domain.record.model.digital_object import DigitalObject
from archview.domain.record.model.subject import Subject
from archview.domain.record.model.view import (
    NormalizedAccessionView,
    NormalizedDigitalObjectView,
)


def resolve_digital_objects(
    accession: Accession,
    digital_objects: Mapping[str, DigitalObject],
) -> list[NormalizedDigitalObjectView]:
    """Digital object views for the accession's instances, in instance order."""
    views = []
    for instance in accession.instances:
        if instance.digital_object is None:
            continue
        obj = digital_objects.get(instance.digital_object.ref)
        if obj is not None:
            views.append(obj.normalize_view())
    return views


def resolve_subject_titles(
    accession: Accession,
    subjects: Mapping[str, Subject],
) -> list[str]:
    """Titles of the accession's subjects, in reference order."""
    titles = []
    for ref in accession.subjects:
        if ref is None:
            continue
        subject = subjects.get(ref.ref)
        if subject is not None:
            titles.append(subject.title)
    return titles


def normalize_accession(
    accession: Accession,
    subjects: Mapping[str, Subject],
    digital_objects: Mapping[str, DigitalObject],
) -> NormalizedAccessionView:
    """Build a self-contained view of an accession.

    Args:
        accession: The accession to project. Not modified.
        subjects: Subjects keyed by URI.
        digital_objects: Digital objects keyed by URI.

    Returns:
        A frozen NormalizedAccessionView. Lists are empty, never None.
    """
    return NormalizedAccessionView(
        uri=accession.uri,
        title=accession.title,
        content_description=accession.content_description,
        condition_description=accession.condition_description,
        accession_date=accession.accession_date,
        created_by=accession.created_by,
        created=accession.create_time,
        last_modified_by=accession.last_modified_by,
        last_modified=accession.user_mtime,
        extents=tuple(extent.physical_details for extent in accession.extents),
        digital_objects=tuple(resolve_digital_objects(accession, digital_objects)),
        subjects=tuple(resolve_subject_titles(accession, subjects)),
    )
