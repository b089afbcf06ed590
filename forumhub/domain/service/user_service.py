"""User domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from forumhub.domain.error import NotFoundError
from forumhub.domain.model import User
from forumhub.domain.repository import UserRepository
from forumhub.domain.value import Badge, Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(
        self, email: Email, username: str, photo_url: Optional[str]
    ) -> tuple[User, bool]:
        """Register a user unless one already exists with this email.

        New users always start with the default role and badge.

        Args:
            email: User email
            username: Display name
            photo_url: Avatar URL

        Returns:
            Tuple of (user, created)
        """
        with logfire.span("user_service.register", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.info("User already registered", user_id=str(existing.id))
                return existing, False

            user = User(
                id=UserId(uuid4()),
                email=email,
                username=username,
                photo_url=photo_url,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved, True

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: Email) -> User:
        """Get user by email.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email.root)
                raise NotFoundError("User", email.root)
            return user

    async def list_users(
        self, search: Optional[str], limit: int, offset: int
    ) -> list[User]:
        """List users, optionally filtered by username substring."""
        with logfire.span(
            "user_service.list_users", search=search, limit=limit, offset=offset
        ):
            users = await self.user_repository.find_all(
                search=search or None, limit=limit, offset=offset
            )
            logfire.info("Users listed", count=len(users))
            return users

    async def toggle_admin(self, email: Email) -> User:
        """Flip a user's role between user and admin.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.toggle_admin", email=email.root):
            user = await self.get_by_email(email)
            updated = user.model_copy(update={"role": user.role.toggled()})
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User role changed", user_id=str(user.id), role=saved.role.value
            )
            return saved

    async def upgrade_badge(self, email: Email) -> User:
        """Award the Gold badge (after a membership payment).

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.upgrade_badge", email=email.root):
            user = await self.get_by_email(email)
            saved = await self.user_repository.save(
                user.model_copy(update={"badge": Badge.GOLD})
            )
            logfire.info("Badge upgraded", user_id=str(user.id))
            return saved

    async def update_about_me(self, email: Email, about_me: Optional[str]) -> User:
        """Replace the user's about-me text.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_about_me", email=email.root):
            user = await self.get_by_email(email)
            # Re-validate so max_length applies (model_copy skips validation)
            updated = User.model_validate({**user.model_dump(), "about_me": about_me})
            saved = await self.user_repository.save(updated)
            logfire.info("About me updated", user_id=str(user.id))
            return saved

    async def count(self) -> int:
        """Count all users."""
        return await self.user_repository.count()
