from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _none_as_empty(v: Any) -> Any:
    return "" if v is None else v


def none_as_list(v: Any) -> Any:
    return [] if v is None else v


# ArchivesSpace exports occasionally carry null for optional string fields.
Text = Annotated[str, BeforeValidator(_none_as_empty)]


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class RecordModel(BaseModel):
    """Base for records decoded from ArchivesSpace JSON. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")
