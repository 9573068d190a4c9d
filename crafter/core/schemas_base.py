"""Shared pydantic base for wizard payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, accepting either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_store(self) -> dict:
        """Dump to the JSON shape kept in the wizard store and sent over the wire."""
        return self.model_dump(mode="json", by_alias=True)
