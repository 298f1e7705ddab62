"""Accession record and its embedded value types.

ArchivesSpace stores references to other records as `{"ref": "<uri>"}`
objects. Instances are loosely typed upstream: some carry a
`digital_object` reference, some a `sub_container`, some neither. The
reference is decoded here, once, so the normalizer only ever sees a
`RecordRef` or `None`.
"""

from typing import TYPE_CHECKING, Any

from pydantic import field_validator

from archview.domain.shared.model.value import RecordModel, Text, ValueObject, none_as_list

if TYPE_CHECKING:
    from archview.domain.record.model.digital_object import DigitalObject
    from archview.domain.record.model.subject import Subject
    from archview.domain.record.model.view import NormalizedAccessionView


class RecordRef(ValueObject):
    """A reference to another record by URI."""

    ref: str


def decode_ref(value: Any) -> RecordRef | None:
    """Decode a reference object, or None if it carries no usable string `ref`."""
    if isinstance(value, RecordRef):
        return value
    if isinstance(value, dict) and isinstance(value.get("ref"), str):
        return RecordRef(ref=value["ref"])
    return None


class Extent(RecordModel):
    physical_details: Text = ""
    extent_type: Text = ""
    portion: Text = ""
    number: str | int | float | None = None


class Instance(RecordModel):
    """An accession instance that may point at a digital object."""

    instance_type: Text = ""
    digital_object: RecordRef | None = None

    @field_validator("digital_object", mode="before")
    @classmethod
    def _decode_digital_object(cls, v: Any) -> RecordRef | None:
        return decode_ref(v)


class Accession(RecordModel):
    """An archival intake record describing a body of material received."""

    uri: Text = ""
    title: Text = ""
    jsonmodel_type: Text = "accession"
    content_description: Text = ""
    condition_description: Text = ""
    accession_date: Text = ""
    created_by: Text = ""
    create_time: Text = ""
    last_modified_by: Text = ""
    user_mtime: Text = ""
    extents: list[Extent] = []
    instances: list[Instance] = []
    subjects: list[RecordRef | None] = []

    @field_validator("extents", mode="before")
    @classmethod
    def _null_extents(cls, v: Any) -> Any:
        # A null entry is an extent with nothing set.
        if not isinstance(v, list):
            return none_as_list(v)
        return [{} if item is None else item for item in v]

    @field_validator("instances", mode="before")
    @classmethod
    def _drop_non_object_instances(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return none_as_list(v)
        return [item for item in v if isinstance(item, (dict, Instance))]

    @field_validator("subjects", mode="before")
    @classmethod
    def _decode_subject_refs(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return none_as_list(v)
        return [decode_ref(item) for item in v]

    def normalize_view(
        self,
        subjects: "dict[str, Subject]",
        digital_objects: "dict[str, DigitalObject]",
    ) -> "NormalizedAccessionView":
        """Resolve this accession's references. See normalize_accession."""
        from archview.domain.record.service.normalize import normalize_accession

        return normalize_accession(self, subjects, digital_objects)
