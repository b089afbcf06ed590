"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from forumhub.domain.model import (
    Announcement,
    Comment,
    Post,
    Tag,
    User,
    VoteRecord,
)
from forumhub.domain.value import (
    AnnouncementId,
    Badge,
    CommentId,
    Email,
    PostId,
    Role,
    TagId,
    TagName,
    UserId,
    Visibility,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        username=row["username"],
        photo_url=row.get("photo_url"),
        role=Role(row["role"]),
        badge=Badge(row["badge"]),
        about_me=row.get("about_me"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump(mode="json") | {"id": user.id, "created_at": user.created_at}


def row_to_vote(row: Dict[str, Any]) -> VoteRecord:
    """Convert a post_votes row to a VoteRecord."""
    return VoteRecord(
        user_email=Email(row["user_email"]),
        vote_type=VoteType(row["vote_type"]),
    )


def row_to_post(
    row: Dict[str, Any], votes: Optional[Iterable[VoteRecord]] = None
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        votes: The post's vote records (from post_votes)

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_email=Email(row["author_email"]),
        author_name=row["author_name"],
        author_image=row.get("author_image"),
        title=row["title"],
        description=row["description"],
        tags=[TagName(tag) for tag in row.get("tags") or []],
        visibility=Visibility(row["visibility"]),
        votes=list(votes or []),
        up_votes=row["up_votes"],
        down_votes=row["down_votes"],
        comments_count=row["comments_count"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts row.

    Votes are excluded; they live in post_votes.
    """
    return {
        "id": post.id,
        "author_email": post.author_email.root,
        "author_name": post.author_name,
        "author_image": post.author_image,
        "title": post.title,
        "description": post.description,
        "tags": [tag.root for tag in post.tags],
        "visibility": post.visibility.value,
        "up_votes": post.up_votes,
        "down_votes": post.down_votes,
        "comments_count": post.comments_count,
        "created_at": post.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        commenter_email=Email(row["commenter_email"]),
        commenter_name=row["commenter_name"],
        commenter_image=row.get("commenter_image"),
        comment_text=row["comment_text"],
        feedbacks=row["feedbacks"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "commenter_email": comment.commenter_email.root,
        "commenter_name": comment.commenter_name,
        "commenter_image": comment.commenter_image,
        "comment_text": comment.comment_text,
        "feedbacks": comment.feedbacks,
        "created_at": comment.created_at,
    }


def row_to_announcement(row: Dict[str, Any]) -> Announcement:
    return Announcement(
        id=AnnouncementId(_uuid(row["id"])),
        author_name=row["author_name"],
        author_image=row.get("author_image"),
        title=row["title"],
        description=row["description"],
        created_at=row["created_at"],
    )


def announcement_to_dict(announcement: Announcement) -> Dict[str, Any]:
    return announcement.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["tag_name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    return {"id": tag.id, "tag_name": tag.name.root, "created_at": tag.created_at}
