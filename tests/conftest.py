"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from forumhub.domain.model import AuthContext, Comment, Post, User
from forumhub.domain.value import (
    CommentId,
    Email,
    PostId,
    Role,
    TagName,
    UserId,
    Visibility,
)

# Keep test runs local and quiet
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    author: str = "author@example.com",
    title: str = "Test Post",
    tags: list[str] | None = None,
    visibility: Visibility = Visibility.PUBLIC,
    age_minutes: int = 0,
) -> Post:
    """Build a post with an empty vote ledger.

    Args:
        author: Author email
        title: Post title
        tags: Tag names (defaults to ["general"])
        visibility: Post visibility
        age_minutes: How long ago the post was created

    Returns:
        Unsaved Post
    """
    return Post(
        id=PostId(uuid4()),
        author_email=Email(author),
        author_name="Author",
        title=title,
        description="Test content",
        tags=[TagName(t) for t in (tags if tags is not None else ["general"])],
        visibility=visibility,
        created_at=datetime.now() - timedelta(minutes=age_minutes),
    )


def make_user(email: str = "user@example.com", role: Role = Role.USER) -> User:
    """Build a user."""
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        username=email.split("@")[0],
        role=role,
    )


def make_comment(
    post_id: PostId, commenter: str = "commenter@example.com", feedbacks: str = ""
) -> Comment:
    """Build a comment on a post."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        commenter_email=Email(commenter),
        commenter_name="Commenter",
        comment_text="Nice post",
        feedbacks=feedbacks,
    )


def make_actor(user: User) -> AuthContext:
    """Authenticated principal for a user."""
    return AuthContext(user_id=user.id, email=user.email, role=user.role)
