"""PostgreSQL implementation of Announcement repository."""

from typing import List

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.domain.model import Announcement
from forumhub.domain.repository import AnnouncementRepository
from forumhub.persistence.mappers import announcement_to_dict, row_to_announcement
from forumhub.persistence.tables import announcements_table


class PostgresAnnouncementRepository(AnnouncementRepository):
    """PostgreSQL implementation of AnnouncementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, announcement: Announcement) -> Announcement:
        stmt = announcements_table.insert().values(**announcement_to_dict(announcement))
        await self.session.execute(stmt)
        await self.session.flush()
        return announcement

    async def find_latest(self, limit: int = 3) -> List[Announcement]:
        stmt = (
            select(announcements_table)
            .order_by(desc(announcements_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_announcement(dict(row)) for row in result.mappings()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(announcements_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
