"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forumhub.domain.model.user import User
from forumhub.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, search: Optional[str] = None, limit: int = 10, offset: int = 0
    ) -> List[User]:
        """Find users, optionally filtered by username.

        Args:
            search: Case-insensitive substring of the username (None for all)
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users ordered by creation time
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
