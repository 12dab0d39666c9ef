"""Meeting Participant Routes - attendance registry of one meeting.

Invariants:
    - Records are addressed by participant_id, not by the attendance row id
    - /potentials is declared before /{participant_id} so it is never captured as an id
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.infrastructure.database import get_db
from approval.schemas.meeting import MeetingParticipantCreate, MeetingParticipantResponse
from approval.services.meeting_participant import MeetingParticipantService

router = APIRouter(
    prefix="/api/v1/approval/{company_id}/meeting/{meeting_id}/participants",
    tags=["meeting participant"],
)


@router.get("/potentials", response_model=list[MeetingParticipantResponse])
async def list_potential_participants(
    company_id: int, meeting_id: int, db: AsyncSession = Depends(get_db),
):
    """Active, type-eligible company participants not yet registered."""
    return await MeetingParticipantService(db).potentials(company_id, meeting_id)


@router.get("", response_model=list[MeetingParticipantResponse])
async def list_meeting_participants(
    company_id: int, meeting_id: int, db: AsyncSession = Depends(get_db),
):
    return await MeetingParticipantService(db).list_registered(company_id, meeting_id)


@router.post(
    "", response_model=list[MeetingParticipantResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_meeting_participants(
    company_id: int, meeting_id: int, body: MeetingParticipantCreate,
    db: AsyncSession = Depends(get_db),
):
    return await MeetingParticipantService(db).add(
        company_id, meeting_id, body.potential_participants,
    )


@router.get("/{participant_id}", response_model=MeetingParticipantResponse)
async def get_meeting_participant(
    company_id: int, meeting_id: int, participant_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await MeetingParticipantService(db).get(company_id, meeting_id, participant_id)


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_meeting_participant(
    company_id: int, meeting_id: int, participant_id: int,
    db: AsyncSession = Depends(get_db),
):
    await MeetingParticipantService(db).remove(company_id, meeting_id, participant_id)
