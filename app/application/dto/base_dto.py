"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Annotated, Any, Optional
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def not_blank(value: str) -> str:
    """Reject strings made only of whitespace."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(not_blank)]


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # camelCase on the wire, snake_case accepted too
        alias_generator=to_camel,
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[int] = None


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """
    Base class for update request DTOs.
    The id comes from the URL path and is set by the router.
    """

    id: Optional[int] = Field(default=None, description="Identifier of the entity to update")


class ApiResponseDTO(BaseDTO):
    """Envelope returned by every endpoint."""

    data: Optional[Any] = Field(default=None, description="Operation payload, null on failure")
    status_code: int = Field(description="Outcome code (200, 400, 404 or 500)")
    message: str = Field(description="Human readable outcome")
    is_success: bool = Field(description="Whether the operation succeeded")
