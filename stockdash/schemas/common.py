from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from stockdash.core.ids import normalize_id


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Ids arrive as numbers or strings; they are compared as strings everywhere.
Identifier = Annotated[str, BeforeValidator(normalize_id)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on disk and on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """A stored record. Unknown keys in legacy files are carried through."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["CamelModel", "Identifier", "RecordModel", "UtcDatetime"]
