"""Meeting Participant Service - who attends a meeting and may vote on its topics.

Invariants:
    - A participant is registered at most once per meeting
    - Only participants of the meeting's company can be registered
    - Registering participants seats them as NOT_VOTED voters on every existing topic
    - Registering or removing participants re-tallies every voting of the meeting
    - Potentials are active, type-eligible and not yet registered; they have no id
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.errors import (
    MeetingParticipantAlreadyExists, MeetingParticipantNotFound,
)
from approval.models.meeting_participant import MeetingParticipant
from approval.repositories import (
    MeetingParticipantRepository, ParticipantRepository, TopicRepository,
)
from approval.schemas.meeting import MeetingParticipantEntry, MeetingParticipantResponse
from approval.schemas.participant import ParticipantResponse
from approval.services.participant import ParticipantService
from approval.services.verifier import Verifier
from approval.services.voting import VotingService

logger = logging.getLogger(__name__)


class MeetingParticipantService:
    """Attendance registry and voter seating."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.meeting_participants = MeetingParticipantRepository(db)
        self.participants = ParticipantRepository(db)
        self.topics = TopicRepository(db)
        self.verifier = Verifier(db)
        self.voting = VotingService(db)

    async def list_registered(
        self, company_id: int, meeting_id: int,
    ) -> list[MeetingParticipant]:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        return await self.meeting_participants.list_by_meeting(meeting.id)

    async def potentials(
        self, company_id: int, meeting_id: int,
    ) -> list[MeetingParticipantResponse]:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        candidates = await self.participants.list_potentials(
            company_id, meeting.id, ParticipantService.eligible_for(meeting.type),
        )
        return [
            MeetingParticipantResponse(
                id=None,
                meeting_id=meeting.id,
                participant=ParticipantResponse.model_validate(p),
                is_present=False,
            )
            for p in candidates
        ]

    async def get(
        self, company_id: int, meeting_id: int, participant_id: int,
    ) -> MeetingParticipant:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        record = await self.meeting_participants.get(meeting.id, participant_id)
        if record is None:
            raise MeetingParticipantNotFound(participant_id)
        return record

    async def add(
        self, company_id: int, meeting_id: int,
        entries: list[MeetingParticipantEntry],
    ) -> list[MeetingParticipant]:
        """Register participants, then seat them on every topic of the meeting."""
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)

        created: list[MeetingParticipant] = []
        seen: set[int] = set()
        for entry in entries:
            participant = await self.verifier.verify_participant(
                company_id, entry.participant_id,
            )
            if entry.participant_id in seen or await self.meeting_participants.get(
                meeting.id, entry.participant_id,
            ) is not None:
                raise MeetingParticipantAlreadyExists(entry.participant_id)
            seen.add(entry.participant_id)
            created.append(await self.meeting_participants.add(MeetingParticipant(
                meeting_id=meeting.id,
                participant=participant,
                is_present=entry.is_present,
            )))

        for topic in await self.topics.list_by_meeting(meeting.id):
            await self.voting.ensure_voting(topic)
        await self.voting.retally_meeting(meeting)

        await self.db.commit()
        logger.info(
            f"Registered {len(created)} meeting participants",
            extra={"company_id": company_id, "meeting_id": meeting_id},
        )
        return created

    async def remove(
        self, company_id: int, meeting_id: int, participant_id: int,
    ) -> None:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        record = await self.meeting_participants.get(meeting.id, participant_id)
        if record is None:
            raise MeetingParticipantNotFound(participant_id)
        await self.meeting_participants.delete(record)
        await self.voting.retally_meeting(meeting)
        await self.db.commit()
        logger.warning(
            "Meeting participant removed",
            extra={"meeting_id": meeting_id, "participant_id": participant_id},
        )
