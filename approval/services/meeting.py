"""Meeting Service - company meetings with optional chairman and secretary.

Invariants:
    - One meeting per (company, type, date)
    - Chairman and secretary must be participants of the same company
    - Changing the meeting type drops every meeting participant and, by cascade, every voter,
      and every voting of the meeting is re-tallied over what remains
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import MeetingType
from approval.core.errors import MeetingAlreadyExists, MeetingTypeNotFound
from approval.core.updater import apply_partial_update
from approval.models.meeting import Meeting
from approval.repositories import MeetingParticipantRepository, MeetingRepository
from approval.schemas.meeting import MeetingCreate, MeetingUpdate
from approval.services.verifier import Verifier, resolve_label
from approval.services.voting import VotingService

logger = logging.getLogger(__name__)


class MeetingService:
    """Meeting lifecycle, roles and type changes."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.meetings = MeetingRepository(db)
        self.meeting_participants = MeetingParticipantRepository(db)
        self.verifier = Verifier(db)
        self.voting = VotingService(db)

    async def _check_roles(
        self, company_id: int, secretary_id: int | None, chairman_id: int | None,
    ) -> None:
        for participant_id in (secretary_id, chairman_id):
            if participant_id is not None:
                await self.verifier.verify_participant(company_id, participant_id)

    async def create(self, company_id: int, body: MeetingCreate) -> Meeting:
        await self.verifier.verify_company(company_id)
        meeting_type = resolve_label(MeetingType, body.type, MeetingTypeNotFound)
        await self._check_roles(company_id, body.secretary_id, body.chairman_id)

        if await self.meetings.find(company_id, meeting_type, body.date) is not None:
            raise MeetingAlreadyExists(company_id, meeting_type.value, body.date)

        meeting = await self.meetings.add(Meeting(
            company_id=company_id,
            type=meeting_type,
            date=body.date,
            address=body.address,
            secretary_id=body.secretary_id,
            chairman_id=body.chairman_id,
        ))
        await self.db.commit()
        logger.info(
            f"Meeting created: {meeting_type.value} on {body.date}",
            extra={"company_id": company_id, "meeting_id": meeting.id},
        )
        return meeting

    async def get(self, company_id: int, meeting_id: int) -> Meeting:
        return await self.verifier.verify_meeting(company_id, meeting_id)

    async def list_page(
        self, company_id: int, page: int, limit: int,
    ) -> tuple[list[Meeting], int]:
        await self.verifier.verify_company(company_id)
        return await self.meetings.list_page(company_id, page, limit)

    async def update(
        self, company_id: int, meeting_id: int, body: MeetingUpdate,
    ) -> Meeting:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        new_type = None
        if body.type is not None:
            new_type = resolve_label(MeetingType, body.type, MeetingTypeNotFound)
        await self._check_roles(company_id, body.secretary_id, body.chairman_id)

        target_type = new_type or meeting.type
        target_date = body.date or meeting.date
        if (target_type, target_date) != (meeting.type, meeting.date):
            clash = await self.meetings.find(company_id, target_type, target_date)
            if clash is not None and clash.id != meeting.id:
                raise MeetingAlreadyExists(company_id, target_type.value, target_date)

        apply_partial_update(meeting, body.model_dump(exclude={"type"}))

        if new_type is not None and new_type != meeting.type:
            meeting.type = new_type
            await self.meeting_participants.delete_by_meeting(meeting.id)
            await self.voting.retally_meeting(meeting)
            logger.warning(
                "Meeting type changed, participants cleared",
                extra={"company_id": company_id, "meeting_id": meeting_id},
            )

        await self.db.commit()
        logger.info(
            "Meeting updated",
            extra={"company_id": company_id, "meeting_id": meeting_id},
        )
        return meeting

    async def delete(self, company_id: int, meeting_id: int) -> None:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        await self.meetings.delete(meeting)
        await self.db.commit()
        logger.warning(
            "Meeting deleted",
            extra={"company_id": company_id, "meeting_id": meeting_id},
        )
