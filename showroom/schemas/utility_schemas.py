from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Schema base exposing camelCase JSON keys while accepting snake_case names too.
    """
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class Msg(BaseModel):
    """
    Schema for generic message responses.
    """
    message: str = Field(..., description="Response message content")
