from typing import Any

from pydantic import field_validator

from archview.domain.record.model.view import NormalizedDigitalObjectView
from archview.domain.shared.model.value import RecordModel, Text, none_as_list


class FileVersion(RecordModel):
    file_uri: Text = ""
    use_statement: Text = ""
    publish: bool = False


class DigitalObject(RecordModel):
    """A digitized surrogate with one or more file versions."""

    uri: Text = ""
    title: Text = ""
    jsonmodel_type: Text = "digital_object"
    digital_object_id: Text = ""
    publish: bool = False
    file_versions: list[FileVersion] = []

    @field_validator("file_versions", mode="before")
    @classmethod
    def _null_file_versions(cls, v: Any) -> Any:
        return none_as_list(v)

    def normalize_view(self) -> NormalizedDigitalObjectView:
        """Project to a view; file versions without a URI are dropped."""
        return NormalizedDigitalObjectView(
            uri=self.uri,
            title=self.title,
            publish=self.publish,
            file_uris=tuple(fv.file_uri for fv in self.file_versions if fv.file_uri),
        )
