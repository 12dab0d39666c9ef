"""Company Routes - CRUD and search over companies.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - limit capped by settings.page_max_limit_company, search criteria by 100 chars
    - Domain errors propagate to the global ApprovalError handler
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from approval.config import get_settings
from approval.infrastructure.database import get_db
from approval.schemas.common import Page, page_of
from approval.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from approval.services.company import CompanyService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/approval/company", tags=["company"])

MAX_LIMIT = get_settings().page_max_limit_company


@router.post(
    "", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED,
)
async def create_company(body: CompanyCreate, db: AsyncSession = Depends(get_db)):
    return await CompanyService(db).create(body)


@router.get("", response_model=Page[CompanyResponse])
async def list_companies(
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    """Companies ordered by title."""
    items, total = await CompanyService(db).list_page(page, limit)
    return page_of(CompanyResponse, items, page, limit, total)


@router.get("/search", response_model=Page[CompanyResponse])
async def search_companies(
    criteria: str = Query("", max_length=100),
    page: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    """Match title (case-insensitive) or INN digits. Blank criteria find nothing."""
    items, total = await CompanyService(db).search(criteria, page, limit)
    return page_of(CompanyResponse, items, page, limit, total)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(company_id: int, db: AsyncSession = Depends(get_db)):
    return await CompanyService(db).get(company_id)


@router.patch("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: int, body: CompanyUpdate, db: AsyncSession = Depends(get_db),
):
    return await CompanyService(db).update(company_id, body)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(company_id: int, db: AsyncSession = Depends(get_db)):
    """Delete company with all participants, meetings, topics and votings."""
    await CompanyService(db).delete(company_id)
