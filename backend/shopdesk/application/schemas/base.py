"""Shared configuration for request/response DTOs."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """DTO base: camelCase on the wire, snake_case attributes in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_fields(self) -> dict[str, Any]:
        """All populated fields, camelCase keys: for creating a record."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_changes(self) -> dict[str, Any]:
        """Only the fields the client sent, camelCase keys: for partial updates."""
        return self.model_dump(by_alias=True, exclude_unset=True)
