"""Participant Repository - company-scoped participant queries.

Invariants:
    - Every listing is scoped to one company and ordered by name
    - list_potentials excludes inactive participants and those already registered
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import ParticipantType
from approval.models.meeting_participant import MeetingParticipant
from approval.models.participant import Participant
from approval.repositories.pagination import fetch_page


class ParticipantRepository:
    """Participant persistence scoped to a company."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, participant_id: int) -> Participant | None:
        return await self.db.get(Participant, participant_id)

    def _by_company(self, company_id: int):
        return (
            select(Participant)
            .where(Participant.company_id == company_id)
            .order_by(Participant.name, Participant.id)
        )

    async def list_by_company(self, company_id: int) -> list[Participant]:
        result = await self.db.execute(self._by_company(company_id))
        return list(result.scalars().all())

    async def list_page(
        self, company_id: int, page: int, limit: int,
    ) -> tuple[list[Participant], int]:
        return await fetch_page(self.db, self._by_company(company_id), page, limit)

    async def search(
        self, company_id: int, criteria: str, page: int, limit: int,
    ) -> tuple[list[Participant], int]:
        query = self._by_company(company_id).where(
            Participant.name.icontains(criteria, autoescape=True),
        )
        return await fetch_page(self.db, query, page, limit)

    async def find_duplicate(
        self, company_id: int, name: str, share: float,
        participant_type: ParticipantType, exclude_id: int | None = None,
    ) -> Participant | None:
        """Another participant of the company with the same name, share and type."""
        query = select(Participant).where(
            Participant.company_id == company_id,
            Participant.name == name,
            Participant.share == share,
            Participant.type == participant_type,
        )
        if exclude_id is not None:
            query = query.where(Participant.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_potentials(
        self, company_id: int, meeting_id: int, participant_type: ParticipantType,
    ) -> list[Participant]:
        """Active participants of the given type not yet registered for the meeting."""
        registered = (
            select(MeetingParticipant.participant_id)
            .where(MeetingParticipant.meeting_id == meeting_id)
        )
        query = self._by_company(company_id).where(
            Participant.is_active.is_(True),
            Participant.type == participant_type,
            Participant.id.not_in(registered),
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def add(self, participant: Participant) -> Participant:
        self.db.add(participant)
        await self.db.flush()
        return participant

    async def delete(self, participant: Participant) -> None:
        await self.db.delete(participant)
        await self.db.flush()
