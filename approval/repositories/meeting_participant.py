"""MeetingParticipant Repository - meeting attendance records.

Invariants:
    - Records come back with their participant loaded (selectin)
    - delete_by_meeting is a bulk DELETE; dependent voters go with it (ON DELETE CASCADE)
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.models.meeting_participant import MeetingParticipant
from approval.models.participant import Participant


class MeetingParticipantRepository:
    """Attendance record persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_meeting(self, meeting_id: int) -> list[MeetingParticipant]:
        result = await self.db.execute(
            select(MeetingParticipant)
            .join(Participant, MeetingParticipant.participant_id == Participant.id)
            .where(MeetingParticipant.meeting_id == meeting_id)
            .order_by(Participant.name, MeetingParticipant.id)
        )
        return list(result.scalars().all())

    async def get(
        self, meeting_id: int, participant_id: int,
    ) -> MeetingParticipant | None:
        result = await self.db.execute(
            select(MeetingParticipant).where(
                MeetingParticipant.meeting_id == meeting_id,
                MeetingParticipant.participant_id == participant_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_by_participant(
        self, participant_id: int,
    ) -> list[MeetingParticipant]:
        result = await self.db.execute(
            select(MeetingParticipant)
            .where(MeetingParticipant.participant_id == participant_id)
        )
        return list(result.scalars().all())

    async def add(self, record: MeetingParticipant) -> MeetingParticipant:
        self.db.add(record)
        await self.db.flush()
        return record

    async def delete(self, record: MeetingParticipant) -> None:
        await self.db.delete(record)
        await self.db.flush()

    async def delete_by_meeting(self, meeting_id: int) -> None:
        await self.db.execute(
            delete(MeetingParticipant)
            .where(MeetingParticipant.meeting_id == meeting_id)
            .execution_options(synchronize_session=False)
        )
