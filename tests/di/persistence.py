"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forumhub.domain.repository import (
    AnnouncementRepository,
    CommentRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from forumhub.persistence.repository.inmemory import (
    InMemoryAnnouncementRepository,
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from forumhub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests of one end-to-end
    test. Every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_announcement_repository(self) -> AnnouncementRepository:
        """Provide in-memory announcement repository."""
        return InMemoryAnnouncementRepository()

    @provide(scope=Scope.APP)
    def get_tag_repository(self) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository()
