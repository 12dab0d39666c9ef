"""Voting Schemas - ballots in, tally out.

Invariants:
    - A ballot addresses an existing voter record by id
    - vote is a VoteType code or label, resolved by the voting service
    - VotingResponse.counts always carries all four vote types
"""

from pydantic import BaseModel, ConfigDict

from approval.core.domain_types import VoteType
from approval.schemas.meeting import MeetingParticipantResponse


class BallotIn(BaseModel):
    id: int
    vote: str
    is_related_party_deal: bool | None = None


class VotingCreate(BaseModel):
    voters: list[BallotIn]


class VoterUpdate(BaseModel):
    is_related_party_deal: bool


class VoterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    voting_id: int
    topic_id: int
    vote: VoteType
    is_related_party_deal: bool
    meeting_participant: MeetingParticipantResponse


class VotingResponse(BaseModel):
    id: int
    topic_id: int
    is_accepted: bool
    voter_ids: list[int] = []
    counts: dict[str, int] = {}
