"""Meeting Repository - company-scoped meeting queries, newest first."""

import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import MeetingType
from approval.models.meeting import Meeting
from approval.repositories.pagination import fetch_page


class MeetingRepository:
    """Meeting persistence scoped to a company."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, meeting_id: int) -> Meeting | None:
        return await self.db.get(Meeting, meeting_id)

    async def list_page(
        self, company_id: int, page: int, limit: int,
    ) -> tuple[list[Meeting], int]:
        query = (
            select(Meeting)
            .where(Meeting.company_id == company_id)
            .order_by(Meeting.date.desc(), Meeting.id.desc())
        )
        return await fetch_page(self.db, query, page, limit)

    async def find(
        self, company_id: int, meeting_type: MeetingType, date: datetime.date,
    ) -> Meeting | None:
        result = await self.db.execute(
            select(Meeting).where(
                Meeting.company_id == company_id,
                Meeting.type == meeting_type,
                Meeting.date == date,
            ).limit(1)
        )
        return result.scalar_one_or_none()

    async def add(self, meeting: Meeting) -> Meeting:
        self.db.add(meeting)
        await self.db.flush()
        return meeting

    async def delete(self, meeting: Meeting) -> None:
        await self.db.delete(meeting)
        await self.db.flush()
