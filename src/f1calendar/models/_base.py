"""Shared configuration for the response models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def blank_to_none(value: Any) -> Any:
    """Treat empty strings and empty objects as missing."""
    if value is None or value == "" or value == {}:
        return None
    return value


OptionalText = Annotated[str | None, BeforeValidator(blank_to_none)]


class OutputModel(BaseModel):
    """Immutable response object serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
