"""Base use case and shared request/response helpers."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from forumhub.domain.error import ValidationError
from forumhub.domain.value import Email


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, as the web client expects.

    Fields are still populated by their Python names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    """Acknowledgement returned by write operations."""

    success: bool = True


class CountResponse(CamelModel):
    count: int


def parse_uuid(value: str, what: str) -> UUID:
    """Parse an identifier from a path or body.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {what} id")


def parse_email(value: str | None, field: str = "email") -> Email:
    """Parse a user-supplied email.

    Raises:
        ValidationError: If the email is missing or malformed
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    try:
        return Email(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}")
