"""Announcement entity, published by admins."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import AnnouncementId


class Announcement(DomainModel):
    """Announcement entity."""

    id: AnnouncementId
    author_name: str = Field(default="", max_length=255)
    author_image: Optional[str] = None
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
