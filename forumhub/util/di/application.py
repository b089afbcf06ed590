"""Application layer DI providers."""

from dishka import Scope, provide

from forumhub.application.usecase.announcement import (
    CreateAnnouncementUseCase,
    ListAnnouncementsUseCase,
)
from forumhub.application.usecase.auth import AuthenticateUseCase, IssueTokenUseCase
from forumhub.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    ListReportedCommentsUseCase,
    ReportCommentUseCase,
    ResolveCommentUseCase,
)
from forumhub.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListAuthorPostsUseCase,
    ListPostsUseCase,
    UpdateVisibilityUseCase,
)
from forumhub.application.usecase.stats import (
    AuthorPostCountUseCase,
    PostCommentCountUseCase,
    SiteCountsUseCase,
)
from forumhub.application.usecase.tag import CreateTagUseCase, ListTagsUseCase
from forumhub.application.usecase.user import (
    GetProfileUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    ToggleAdminUseCase,
    UpdateAboutMeUseCase,
    UpgradeBadgeUseCase,
)
from forumhub.application.usecase.vote import CastVoteUseCase
from forumhub.config import AuthSettings
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_issue_token_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> IssueTokenUseCase:
        """Provide issue token use case."""
        return IssueTokenUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_authenticate_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)

    @provide
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_toggle_admin_use_case(
        self, user_service: UserService
    ) -> ToggleAdminUseCase:
        """Provide toggle admin use case."""
        return ToggleAdminUseCase(user_service=user_service)

    @provide
    def get_upgrade_badge_use_case(
        self, user_service: UserService
    ) -> UpgradeBadgeUseCase:
        """Provide upgrade badge use case."""
        return UpgradeBadgeUseCase(user_service=user_service)

    @provide
    def get_update_about_me_use_case(
        self, user_service: UserService
    ) -> UpdateAboutMeUseCase:
        """Provide update about-me use case."""
        return UpdateAboutMeUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_list_author_posts_use_case(
        self, post_service: PostService
    ) -> ListAuthorPostsUseCase:
        """Provide list author posts use case."""
        return ListAuthorPostsUseCase(post_service=post_service)

    @provide
    def get_update_visibility_use_case(
        self, post_service: PostService
    ) -> UpdateVisibilityUseCase:
        """Provide update visibility use case."""
        return UpdateVisibilityUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, comment_service=comment_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide
    def get_report_comment_use_case(
        self, comment_service: CommentService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_reported_comments_use_case(
        self, comment_service: CommentService
    ) -> ListReportedCommentsUseCase:
        """Provide list reported comments use case."""
        return ListReportedCommentsUseCase(comment_service=comment_service)

    @provide
    def get_resolve_comment_use_case(
        self, comment_service: CommentService
    ) -> ResolveCommentUseCase:
        """Provide resolve comment use case."""
        return ResolveCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Announcement use cases
    @provide
    def get_create_announcement_use_case(
        self, announcement_service: AnnouncementService
    ) -> CreateAnnouncementUseCase:
        """Provide create announcement use case."""
        return CreateAnnouncementUseCase(announcement_service=announcement_service)

    @provide
    def get_list_announcements_use_case(
        self, announcement_service: AnnouncementService
    ) -> ListAnnouncementsUseCase:
        """Provide list announcements use case."""
        return ListAnnouncementsUseCase(announcement_service=announcement_service)

    # Tag use cases
    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Count use cases
    @provide
    def get_site_counts_use_case(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        announcement_service: AnnouncementService,
    ) -> SiteCountsUseCase:
        """Provide site counts use case."""
        return SiteCountsUseCase(
            user_service=user_service,
            post_service=post_service,
            comment_service=comment_service,
            announcement_service=announcement_service,
        )

    @provide
    def get_author_post_count_use_case(
        self, post_service: PostService
    ) -> AuthorPostCountUseCase:
        """Provide author post count use case."""
        return AuthorPostCountUseCase(post_service=post_service)

    @provide
    def get_post_comment_count_use_case(
        self, comment_service: CommentService
    ) -> PostCommentCountUseCase:
        """Provide post comment count use case."""
        return PostCommentCountUseCase(comment_service=comment_service)
