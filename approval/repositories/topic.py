"""Topic Repository - meeting-scoped agenda items ordered by title."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.models.topic import Topic
from approval.repositories.pagination import fetch_page


class TopicRepository:
    """Topic persistence scoped to a meeting."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, topic_id: int) -> Topic | None:
        return await self.db.get(Topic, topic_id)

    def _by_meeting(self, meeting_id: int):
        return (
            select(Topic)
            .where(Topic.meeting_id == meeting_id)
            .order_by(Topic.title, Topic.id)
        )

    async def list_by_meeting(self, meeting_id: int) -> list[Topic]:
        result = await self.db.execute(self._by_meeting(meeting_id))
        return list(result.scalars().all())

    async def list_page(
        self, meeting_id: int, page: int, limit: int,
    ) -> tuple[list[Topic], int]:
        return await fetch_page(self.db, self._by_meeting(meeting_id), page, limit)

    async def search(
        self, meeting_id: int, criteria: str, page: int, limit: int,
    ) -> tuple[list[Topic], int]:
        query = self._by_meeting(meeting_id).where(
            Topic.title.icontains(criteria, autoescape=True),
        )
        return await fetch_page(self.db, query, page, limit)

    async def add(self, topic: Topic) -> Topic:
        self.db.add(topic)
        await self.db.flush()
        return topic

    async def delete(self, topic: Topic) -> None:
        await self.db.delete(topic)
        await self.db.flush()
