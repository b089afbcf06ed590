"""Comment entity.

Comments are flat replies on a post. A comment can be reported by setting
feedbacks; an admin resolves the report by clearing it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import CommentId, Email, PostId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    commenter_email: Email
    commenter_name: str = Field(default="", max_length=255)
    commenter_image: Optional[str] = None
    comment_text: str = Field(min_length=1, max_length=10000)
    feedbacks: str = Field(default="", max_length=500)  # Report reason, "" when not reported
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reported(self) -> bool:
        return bool(self.feedbacks)
