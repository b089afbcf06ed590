"""User aggregate root.

Users are registered by the frontend after it authenticates them with its
identity provider; the API only stores the profile and the role.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import Badge, Email, Role, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: Email
    username: str = Field(default="", max_length=255)
    photo_url: Optional[str] = None
    role: Role = Role.USER
    badge: Badge = Badge.BRONZE
    about_me: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
