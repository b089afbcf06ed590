"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.domain.model import Tag
from forumhub.domain.repository import TagRepository
from forumhub.domain.value import TagName
from forumhub.persistence.mappers import row_to_tag, tag_to_dict
from forumhub.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        await self.session.execute(tags_table.insert().values(**tag_to_dict(tag)))
        await self.session.flush()
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.tag_name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(dict(row)) if row else None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.tag_name)
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings()]
