"""Normalized views - flattened, reference-resolved projections for display."""

from archview.domain.shared.model.value import ValueObject


class NormalizedDigitalObjectView(ValueObject):
    """A digital object reduced to what a public page needs."""

    uri: str = ""
    title: str = ""
    publish: bool = False
    file_uris: tuple[str, ...] = ()


class NormalizedAccessionView(ValueObject):
    """An accession with its subject and digital object references resolved.

    Holds copies of scalar data only, so it stays valid after the record
    store that produced it is gone. `related_resources`, `related_accessions`
    and `linked_agents` are part of the published shape but are not resolved.
    """

    uri: str = ""
    title: str = ""
    content_description: str = ""
    condition_description: str = ""
    subjects: tuple[str, ...] = ()
    extents: tuple[str, ...] = ()
    related_resources: tuple[str, ...] = ()
    related_accessions: tuple[str, ...] = ()
    digital_objects: tuple[NormalizedDigitalObjectView, ...] = ()
    linked_agents: tuple[str, ...] = ()
    accession_date: str = ""
    created_by: str = ""
    created: str = ""
    last_modified_by: str = ""
    last_modified: str = ""
