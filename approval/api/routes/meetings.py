"""Meeting Routes - meetings of one company, newest first.

Invariants:
    - PATCH with a different type clears the meeting's participants and voters
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.config import get_settings
from approval.infrastructure.database import get_db
from approval.schemas.common import Page, page_of
from approval.schemas.meeting import MeetingCreate, MeetingResponse, MeetingUpdate
from approval.services.meeting import MeetingService

router = APIRouter(prefix="/api/v1/approval/{company_id}/meeting", tags=["meeting"])

MAX_LIMIT = get_settings().page_max_limit_meeting


@router.post(
    "", response_model=MeetingResponse, status_code=status.HTTP_201_CREATED,
)
async def create_meeting(
    company_id: int, body: MeetingCreate, db: AsyncSession = Depends(get_db),
):
    return await MeetingService(db).create(company_id, body)


@router.get("", response_model=Page[MeetingResponse])
async def list_meetings(
    company_id: int,
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    items, total = await MeetingService(db).list_page(company_id, page, limit)
    return page_of(MeetingResponse, items, page, limit, total)


@router.get("/{meeting_id}", response_model=MeetingResponse)
async def get_meeting(
    company_id: int, meeting_id: int, db: AsyncSession = Depends(get_db),
):
    return await MeetingService(db).get(company_id, meeting_id)


@router.patch("/{meeting_id}", response_model=MeetingResponse)
async def update_meeting(
    company_id: int, meeting_id: int, body: MeetingUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await MeetingService(db).update(company_id, meeting_id, body)


@router.delete("/{meeting_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meeting(
    company_id: int, meeting_id: int, db: AsyncSession = Depends(get_db),
):
    await MeetingService(db).delete(company_id, meeting_id)
