from typing import Annotated
from pydantic import BaseModel as PydanticBaseModel, BeforeValidator, WithJsonSchema, ConfigDict

# Discord snowflakes are opaque strings on the wire, integers are coerced
Snowflake = Annotated[str, BeforeValidator(
    str), WithJsonSchema({"type": 'string'})]


class BaseModel(PydanticBaseModel):
    """Base model with a set configuration."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)


class FrozenModel(PydanticBaseModel):
    """Base model for immutable values that may be shared between tasks."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)
