"""Domain value objects for ForumHub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from forumhub.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Kind of vote a user can cast on a post."""

    UP = "up"
    DOWN = "down"


class Role(str, Enum):
    """User role used by the admin check."""

    USER = "user"
    ADMIN = "admin"

    def toggled(self) -> "Role":
        """Return the opposite role (make-admin is a toggle)."""
        return Role.USER if self == Role.ADMIN else Role.ADMIN


class Badge(str, Enum):
    """Membership badge."""

    BRONZE = "Bronze"
    GOLD = "Gold"


class Visibility(str, Enum):
    """Post visibility. Private posts are hidden from public listings."""

    PUBLIC = "public"
    PRIVATE = "private"


class Email(RootValueObject[str]):
    """Email address used as the user's login and voter key.

    Only minimally validated: the frontend's identity provider owns the format.
    Stored trimmed with case preserved, since stored votes and posts match on it exactly.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email is non-blank and looks like an address."""
        v = v.strip()
        if not v or "@" not in v or len(v) > 255:
            raise ValueError("Invalid email address")
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing posts (1-50 characters, trimmed)."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        return v
