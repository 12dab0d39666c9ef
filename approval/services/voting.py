"""Voting Service - per-topic votings, voter records and the tally.

Invariants:
    - Every topic has at most one voting; ensure_voting is idempotent
    - Every registered meeting participant has exactly one voter record per voting
    - New voter records start as NOT_VOTED
    - is_accepted is recomputed over all voter records whenever ballots or the voter set change

Design Decisions:
    - Weighted by participant share for general meetings, one head one vote for BOD
      (core/tally.py owns the arithmetic; this service only feeds it)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import MeetingType, VoteType
from approval.core.errors import VoteTypeNotFound, VoterNotFound, VotingNotFound
from approval.core.tally import Ballot, VoteTally, is_weighted, tally_votes
from approval.models.meeting import Meeting
from approval.models.topic import Topic
from approval.models.voter import Voter
from approval.models.voting import Voting
from approval.repositories import (
    MeetingParticipantRepository, TopicRepository, VoterRepository, VotingRepository,
)
from approval.schemas.voting import BallotIn, VoterUpdate, VotingResponse
from approval.services.verifier import Verifier, resolve_label

logger = logging.getLogger(__name__)


def _ballots(voters: list[Voter]) -> list[Ballot]:
    return [
        Ballot(vote=v.vote, share=v.meeting_participant.participant.share)
        for v in voters
    ]


def to_response(voting: Voting, voters: list[Voter], tally: VoteTally) -> VotingResponse:
    return VotingResponse(
        id=voting.id,
        topic_id=voting.topic_id,
        is_accepted=voting.is_accepted,
        voter_ids=[v.id for v in voters],
        counts={vote.value: count for vote, count in tally.counts.items()},
    )


class VotingService:
    """Votings, voter records and tallies."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.votings = VotingRepository(db)
        self.voters = VoterRepository(db)
        self.meeting_participants = MeetingParticipantRepository(db)
        self.topics = TopicRepository(db)
        self.verifier = Verifier(db)

    async def ensure_voting(self, topic: Topic) -> Voting:
        """Find or create the topic's voting and backfill missing voter records.

        Does not commit: callers fold this into their own transaction.
        """
        voting = await self.votings.get_by_topic(topic.id)
        if voting is None:
            voting = await self.votings.add(Voting(topic_id=topic.id, is_accepted=False))

        seated = {v.meeting_participant_id for v in await self.voters.list_by_voting(voting.id)}
        missing = [
            Voter(
                voting_id=voting.id,
                topic_id=topic.id,
                meeting_participant=record,
                vote=VoteType.NOT_VOTED,
                is_related_party_deal=False,
            )
            for record in await self.meeting_participants.list_by_meeting(topic.meeting_id)
            if record.id not in seated
        ]
        if missing:
            await self.voters.add_all(missing)
            logger.debug(
                f"Added {len(missing)} voter records",
                extra={"topic_id": topic.id},
            )
        return voting

    async def retally(
        self, voting: Voting, meeting_type: MeetingType,
    ) -> tuple[list[Voter], VoteTally]:
        """Recount the voting over its current voter records and store is_accepted."""
        voters = await self.voters.list_by_voting(voting.id)
        tally = tally_votes(_ballots(voters), is_weighted(meeting_type))
        voting.is_accepted = tally.accepted
        return voters, tally

    async def retally_meeting(self, meeting: Meeting) -> None:
        """Recount every voting of the meeting after its voter set changed. Does not commit."""
        for topic in await self.topics.list_by_meeting(meeting.id):
            voting = await self.votings.get_by_topic(topic.id)
            if voting is not None:
                await self.retally(voting, meeting.type)

    async def _resolve(
        self, company_id: int, meeting_id: int, topic_id: int,
    ) -> tuple[Meeting, Voting]:
        meeting = await self.verifier.verify_meeting(company_id, meeting_id)
        topic = await self.verifier.verify_topic(meeting, topic_id)
        voting = await self.votings.get_by_topic(topic.id)
        if voting is None:
            raise VotingNotFound(topic_id)
        return meeting, voting

    async def get(
        self, company_id: int, meeting_id: int, topic_id: int,
    ) -> VotingResponse:
        meeting, voting = await self._resolve(company_id, meeting_id, topic_id)
        voters = await self.voters.list_by_voting(voting.id)
        tally = tally_votes(_ballots(voters), is_weighted(meeting.type))
        return to_response(voting, voters, tally)

    async def list_voters(
        self, company_id: int, meeting_id: int, topic_id: int,
    ) -> list[Voter]:
        _, voting = await self._resolve(company_id, meeting_id, topic_id)
        return await self.voters.list_by_voting(voting.id)

    async def make_vote(
        self, company_id: int, meeting_id: int, topic_id: int,
        ballots: list[BallotIn],
    ) -> VotingResponse:
        """Apply ballots to voter records, then re-tally the whole voting."""
        meeting, voting = await self._resolve(company_id, meeting_id, topic_id)
        voters = await self.voters.list_by_voting(voting.id)
        by_id = {v.id: v for v in voters}

        for ballot in ballots:
            voter = by_id.get(ballot.id)
            if voter is None:
                raise VoterNotFound(ballot.id)
            voter.vote = resolve_label(VoteType, ballot.vote, VoteTypeNotFound)
            if ballot.is_related_party_deal is not None:
                voter.is_related_party_deal = ballot.is_related_party_deal

        voters, tally = await self.retally(voting, meeting.type)
        await self.db.commit()

        logger.info(
            f"Vote recorded: {len(ballots)} ballots, accepted={tally.accepted}",
            extra={"company_id": company_id, "meeting_id": meeting_id, "topic_id": topic_id},
        )
        return to_response(voting, voters, tally)

    async def update_voter(
        self, company_id: int, meeting_id: int, topic_id: int,
        voter_id: int, body: VoterUpdate,
    ) -> Voter:
        _, voting = await self._resolve(company_id, meeting_id, topic_id)
        voter = await self.voters.get(voter_id)
        if voter is None or voter.voting_id != voting.id:
            raise VoterNotFound(voter_id)

        voter.is_related_party_deal = body.is_related_party_deal
        await self.db.commit()
        return voter
