"""Topic Routes - agenda of one meeting."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.config import get_settings
from approval.infrastructure.database import get_db
from approval.schemas.common import Page, page_of
from approval.schemas.topic import TopicCreate, TopicResponse, TopicUpdate
from approval.services.topic import TopicService

router = APIRouter(
    prefix="/api/v1/approval/{company_id}/meeting/{meeting_id}/topic",
    tags=["topic"],
)

MAX_LIMIT = get_settings().page_max_limit_topic


@router.post(
    "", response_model=TopicResponse, status_code=status.HTTP_201_CREATED,
)
async def create_topic(
    company_id: int, meeting_id: int, body: TopicCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create topic together with its voting and NOT_VOTED voters."""
    return await TopicService(db).create(company_id, meeting_id, body)


@router.get("", response_model=Page[TopicResponse])
async def list_topics(
    company_id: int, meeting_id: int,
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    items, total = await TopicService(db).list_page(company_id, meeting_id, page, limit)
    return page_of(TopicResponse, items, page, limit, total)


@router.get("/search", response_model=Page[TopicResponse])
async def search_topics(
    company_id: int, meeting_id: int,
    criteria: str = Query("", max_length=100),
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    items, total = await TopicService(db).search(
        company_id, meeting_id, criteria, page, limit,
    )
    return page_of(TopicResponse, items, page, limit, total)


@router.get("/{topic_id}", response_model=TopicResponse)
async def get_topic(
    company_id: int, meeting_id: int, topic_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await TopicService(db).get(company_id, meeting_id, topic_id)


@router.patch("/{topic_id}", response_model=TopicResponse)
async def update_topic(
    company_id: int, meeting_id: int, topic_id: int, body: TopicUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await TopicService(db).update(company_id, meeting_id, topic_id, body)


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(
    company_id: int, meeting_id: int, topic_id: int,
    db: AsyncSession = Depends(get_db),
):
    await TopicService(db).delete(company_id, meeting_id, topic_id)
