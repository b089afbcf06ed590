"""Tag entity for categorizing posts."""

from datetime import datetime

from pydantic import Field

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Admins curate the tag list; posts store tag names directly.
    """

    id: TagId
    name: TagName  # Unique
    created_at: datetime = Field(default_factory=datetime.now)
