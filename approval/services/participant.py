"""Participant Service - owners and board members scoped to one company.

Invariants:
    - The company in the URL is authoritative; a company_id in the body is ignored
    - Changing a participant's type must not produce a twin (same company, name, share, type)
    - Deleting an active participant with meeting history only deactivates it
    - Hard-deleting a registered participant re-tallies the votings it was seated in

Design Decisions:
    - Soft delete keeps voter records and minutes of past meetings intact
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import (
    MeetingType, ParticipantType, eligible_participant_type,
)
from approval.core.errors import ParticipantAlreadyExists, ParticipantTypeNotFound
from approval.core.updater import apply_partial_update
from approval.models.participant import Participant
from approval.repositories import (
    MeetingParticipantRepository, MeetingRepository, ParticipantRepository,
)
from approval.schemas.participant import ParticipantCreate, ParticipantUpdate
from approval.services.verifier import Verifier, resolve_label
from approval.services.voting import VotingService

logger = logging.getLogger(__name__)


class ParticipantService:
    """Participant lifecycle with soft delete."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participants = ParticipantRepository(db)
        self.meeting_participants = MeetingParticipantRepository(db)
        self.meetings = MeetingRepository(db)
        self.voting = VotingService(db)
        self.verifier = Verifier(db)

    async def create(self, company_id: int, body: ParticipantCreate) -> Participant:
        await self.verifier.verify_company(company_id)
        participant_type = resolve_label(
            ParticipantType, body.type, ParticipantTypeNotFound,
        )
        participant = await self.participants.add(Participant(
            name=body.name,
            share=body.share,
            company_id=company_id,
            type=participant_type,
            is_active=body.is_active,
        ))
        await self.db.commit()
        logger.info(
            f"Participant created: {participant.name}",
            extra={"company_id": company_id, "participant_id": participant.id},
        )
        return participant

    async def get(self, company_id: int, participant_id: int) -> Participant:
        await self.verifier.verify_company(company_id)
        return await self.verifier.verify_participant(company_id, participant_id)

    async def list_page(
        self, company_id: int, page: int, limit: int,
    ) -> tuple[list[Participant], int]:
        await self.verifier.verify_company(company_id)
        return await self.participants.list_page(company_id, page, limit)

    async def search(
        self, company_id: int, criteria: str | None, page: int, limit: int,
    ) -> tuple[list[Participant], int]:
        await self.verifier.verify_company(company_id)
        criteria = (criteria or "").strip()
        if not criteria:
            return [], 0
        return await self.participants.search(company_id, criteria, page, limit)

    async def update(
        self, company_id: int, participant_id: int, body: ParticipantUpdate,
    ) -> Participant:
        participant = await self.get(company_id, participant_id)
        new_type = None
        if body.type is not None:
            new_type = resolve_label(ParticipantType, body.type, ParticipantTypeNotFound)

        apply_partial_update(participant, body.model_dump(exclude={"type"}))

        if new_type is not None and new_type != participant.type:
            twin = await self.participants.find_duplicate(
                company_id, participant.name, participant.share, new_type,
                exclude_id=participant.id,
            )
            if twin is not None:
                raise ParticipantAlreadyExists(participant.name)
            participant.type = new_type

        await self.db.commit()
        logger.info(
            "Participant updated",
            extra={"company_id": company_id, "participant_id": participant_id},
        )
        return participant

    async def delete(self, company_id: int, participant_id: int) -> None:
        participant = await self.get(company_id, participant_id)
        registered = await self.meeting_participants.list_by_participant(participant_id)

        if participant.is_active and registered:
            participant.is_active = False
            logger.warning(
                "Participant deactivated (has meeting history)",
                extra={"company_id": company_id, "participant_id": participant_id},
            )
        else:
            meeting_ids = {record.meeting_id for record in registered}
            await self.participants.delete(participant)
            for meeting_id in sorted(meeting_ids):
                meeting = await self.meetings.get(meeting_id)
                if meeting is not None:
                    await self.voting.retally_meeting(meeting)
            logger.warning(
                "Participant deleted",
                extra={"company_id": company_id, "participant_id": participant_id},
            )
        await self.db.commit()

    @staticmethod
    def eligible_for(meeting_type: MeetingType) -> ParticipantType:
        return eligible_participant_type(meeting_type)
