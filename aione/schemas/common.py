"""Shared schema configuration: camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response bodies. Accepts camelCase or snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Confirmation body for operations without a payload (e.g. delete)."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
