"""Schema Base — camelCase JSON on the wire, snake_case attributes in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request models: accept camelCase keys only."""
    model_config = ConfigDict(alias_generator=to_camel)


class CamelResponseModel(BaseModel):
    """Response models: built from ORM rows or by field name, dumped as camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )
