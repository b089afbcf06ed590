"""Domain layer DI providers."""

from dishka import Scope, provide

from forumhub.config import AuthSettings
from forumhub.domain.repository import (
    AnnouncementRepository,
    CommentRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from forumhub.domain.service import (
    AnnouncementService,
    CommentService,
    JWTService,
    PostService,
    TagService,
    UserService,
    VoteService,
)
from forumhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_vote_service(self, post_repository: PostRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_announcement_service(
        self, announcement_repository: AnnouncementRepository
    ) -> AnnouncementService:
        """Provide announcement domain service."""
        return AnnouncementService(announcement_repository=announcement_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
