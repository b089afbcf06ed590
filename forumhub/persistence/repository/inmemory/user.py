"""In-memory user repository for testing."""

from typing import Optional

from forumhub.domain.model.user import User
from forumhub.domain.repository.user import UserRepository
from forumhub.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(
        self, search: Optional[str] = None, limit: int = 10, offset: int = 0
    ) -> list[User]:
        """Find users, optionally filtered by username substring."""
        users = list(self._users.values())
        if search:
            users = [u for u in users if search.lower() in u.username.lower()]
        users.sort(key=lambda u: u.created_at)
        return users[offset : offset + limit]

    async def count(self) -> int:
        return len(self._users)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
