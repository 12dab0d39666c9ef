"""Voting Routes - a topic's voting, its voters and ballot submission.

Invariants:
    - make_vote answers 201 with the re-tallied voting
    - Ballots address voter records of this topic only (VoterNotFound otherwise)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.infrastructure.database import get_db
from approval.schemas.voting import (
    VoterResponse, VoterUpdate, VotingCreate, VotingResponse,
)
from approval.services.voting import VotingService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/approval/{company_id}/{meeting_id}/{topic_id}/voting",
    tags=["voting"],
)


@router.get("", response_model=VotingResponse)
async def get_voting(
    company_id: int, meeting_id: int, topic_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await VotingService(db).get(company_id, meeting_id, topic_id)


@router.get("/voters", response_model=list[VoterResponse])
async def list_voters(
    company_id: int, meeting_id: int, topic_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await VotingService(db).list_voters(company_id, meeting_id, topic_id)


@router.post(
    "/make_vote", response_model=VotingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def make_vote(
    company_id: int, meeting_id: int, topic_id: int, body: VotingCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record ballots and recompute whether the topic is accepted."""
    logger.debug(
        f"make_vote with {len(body.voters)} ballots",
        extra={"topic_id": topic_id},
    )
    return await VotingService(db).make_vote(
        company_id, meeting_id, topic_id, body.voters,
    )


@router.patch("/voters/{voter_id}", response_model=VoterResponse)
async def update_voter(
    company_id: int, meeting_id: int, topic_id: int, voter_id: int,
    body: VoterUpdate, db: AsyncSession = Depends(get_db),
):
    return await VotingService(db).update_voter(
        company_id, meeting_id, topic_id, voter_id, body,
    )
