"""Base model shared by every stored record."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Record(BaseModel):
    """A single item of a collection, uniquely identified by ``id``.

    Field names are snake_case in Python and camelCase in the JSON files.
    Fields the model does not declare are kept, so records written by older
    versions survive a read/write cycle unchanged.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    created_at: str | None = None
    updated_at: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase mapping stored on disk."""
        return self.model_dump(by_alias=True, exclude_none=True)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a stored ISO-8601 timestamp; None for missing or malformed values."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
