"""Common Pydantic schemas and base classes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration (camelCase on the wire)."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class StatusResponse(BaseSchema):
    """Plain success/failure response."""

    success: bool
    message: Optional[str] = None
