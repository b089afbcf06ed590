"""Authorization context.

Resolved once per request from the auth cookie and passed explicitly to the
operations that need to know who is acting.
"""

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import Email, Role, UserId


class AuthContext(DomainModel):
    """The authenticated principal."""

    user_id: UserId
    email: Email
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_modify(self, owner_email: Email) -> bool:
        """Owners and admins may modify a resource."""
        return self.is_admin or self.email == owner_email
