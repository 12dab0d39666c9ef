"""Participant Routes - owners and board members of one company."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.config import get_settings
from approval.infrastructure.database import get_db
from approval.schemas.common import Page, page_of
from approval.schemas.participant import (
    ParticipantCreate, ParticipantResponse, ParticipantUpdate,
)
from approval.services.participant import ParticipantService

router = APIRouter(prefix="/api/v1/approval/{company_id}/participant", tags=["participant"])

MAX_LIMIT = get_settings().page_max_limit_participant


@router.post(
    "", response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED,
)
async def create_participant(
    company_id: int, body: ParticipantCreate, db: AsyncSession = Depends(get_db),
):
    return await ParticipantService(db).create(company_id, body)


@router.get("", response_model=Page[ParticipantResponse])
async def list_participants(
    company_id: int,
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    items, total = await ParticipantService(db).list_page(company_id, page, limit)
    return page_of(ParticipantResponse, items, page, limit, total)


@router.get("/search", response_model=Page[ParticipantResponse])
async def search_participants(
    company_id: int,
    criteria: str = Query("", max_length=50),
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    items, total = await ParticipantService(db).search(company_id, criteria, page, limit)
    return page_of(ParticipantResponse, items, page, limit, total)


@router.get("/{participant_id}", response_model=ParticipantResponse)
async def get_participant(
    company_id: int, participant_id: int, db: AsyncSession = Depends(get_db),
):
    return await ParticipantService(db).get(company_id, participant_id)


@router.patch("/{participant_id}", response_model=ParticipantResponse)
async def update_participant(
    company_id: int, participant_id: int, body: ParticipantUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await ParticipantService(db).update(company_id, participant_id, body)


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_participant(
    company_id: int, participant_id: int, db: AsyncSession = Depends(get_db),
):
    """Deactivates instead of deleting when the participant has meeting history."""
    await ParticipantService(db).delete(company_id, participant_id)
