"""
Shared schema bases and the response envelope.

JSON uses camelCase on the wire (skillName, employmentType, ...). Request
bodies also accept the snake_case field names and reject unknown fields.
"""

from typing import Any, Generic, Optional, TypeVar
from pydantic import AnyHttpUrl, BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

T = TypeVar("T")

HTTP_URL = TypeAdapter(AnyHttpUrl)


class CamelModel(BaseModel):
    """Base for response schemas built from ORM objects."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(BaseModel):
    """Base for request bodies."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class APIResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Envelope for failed requests (documented in OpenAPI)."""
    success: bool = False
    message: str
    errors: Optional[Any] = None


def blank_to_none(value: Any) -> Any:
    """Optional text fields store null instead of empty strings."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def check_http_url(value: Optional[str], field_name: str) -> Optional[str]:
    """
    Require an absolute http(s) URL with a host.

    The submitted string is kept as-is; pydantic would otherwise append a
    trailing slash to bare hosts.
    """
    if value is None:
        return value
    try:
        HTTP_URL.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"{field_name} must be a valid http:// or https:// URL")
    return value
