"""Voting and Voter Repositories - per-topic voting and its ballot records.

Invariants:
    - At most one Voting per topic
    - Voters come back with meeting_participant and participant loaded (selectin)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.models.voter import Voter
from approval.models.voting import Voting


class VotingRepository:
    """One voting per topic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_topic(self, topic_id: int) -> Voting | None:
        result = await self.db.execute(
            select(Voting).where(Voting.topic_id == topic_id)
        )
        return result.scalar_one_or_none()

    async def add(self, voting: Voting) -> Voting:
        self.db.add(voting)
        await self.db.flush()
        return voting


class VoterRepository:
    """Voter records of a voting."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, voter_id: int) -> Voter | None:
        result = await self.db.execute(select(Voter).where(Voter.id == voter_id))
        return result.scalar_one_or_none()

    async def list_by_voting(self, voting_id: int) -> list[Voter]:
        result = await self.db.execute(
            select(Voter).where(Voter.voting_id == voting_id).order_by(Voter.id)
        )
        return list(result.scalars().all())

    async def list_by_topic(self, topic_id: int) -> list[Voter]:
        result = await self.db.execute(
            select(Voter).where(Voter.topic_id == topic_id).order_by(Voter.id)
        )
        return list(result.scalars().all())

    async def add_all(self, voters: list[Voter]) -> list[Voter]:
        self.db.add_all(voters)
        await self.db.flush()
        return voters
