"""Topic Service - agenda items of a meeting.

Invariants:
    - A new topic is created together with its voting and one NOT_VOTED voter
      per registered meeting participant, in one transaction
    - Deleting a topic removes its voting and voters (FK cascade)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.updater import apply_partial_update
from approval.models.topic import Topic
from approval.repositories import TopicRepository
from approval.schemas.topic import TopicCreate, TopicUpdate
from approval.services.verifier import Verifier
from approval.services.voting import VotingService

logger = logging.getLogger(__name__)


class TopicService:
    """Agenda items and their votings."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.topics = TopicRepository(db)
        self.verifier = Verifier(db)
        self.voting = VotingService(db)

    async def create(
        self, company_id: int, meeting_id: int, body: TopicCreate,
    ) -> Topic:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        topic = await self.topics.add(Topic(title=body.title, meeting_id=meeting.id))
        await self.voting.ensure_voting(topic)
        await self.db.commit()
        logger.info(
            f"Topic created: {topic.title}",
            extra={"meeting_id": meeting_id, "topic_id": topic.id},
        )
        return topic

    async def get(self, company_id: int, meeting_id: int, topic_id: int) -> Topic:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        return await self.verifier.verify_topic(meeting, topic_id)

    async def list_page(
        self, company_id: int, meeting_id: int, page: int, limit: int,
    ) -> tuple[list[Topic], int]:
        await self.verifier.verify_meeting(company_id, meeting_id)
        return await self.topics.list_page(meeting_id, page, limit)

    async def search(
        self, company_id: int, meeting_id: int, criteria: str | None,
        page: int, limit: int,
    ) -> tuple[list[Topic], int]:
        await self.verifier.verify_meeting(company_id, meeting_id)
        criteria = (criteria or "").strip()
        if not criteria:
            return [], 0
        return await self.topics.search(meeting_id, criteria, page, limit)

    async def update(
        self, company_id: int, meeting_id: int, topic_id: int, body: TopicUpdate,
    ) -> Topic:
        topic = await self.get(company_id, meeting_id, topic_id)
        apply_partial_update(topic, body)
        await self.db.commit()
        return topic

    async def delete(self, company_id: int, meeting_id: int, topic_id: int) -> None:
        topic = await self.get(company_id, meeting_id, topic_id)
        await self.topics.delete(topic)
        await self.db.commit()
        logger.warning(
            "Topic deleted", extra={"meeting_id": meeting_id, "topic_id": topic_id},
        )
