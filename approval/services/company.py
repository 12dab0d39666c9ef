"""Company Service - create, read, search, update and delete companies.

Invariants:
    - INN is unique: create and update raise CompanyAlreadyExists on collision
      (also when the unique index, not the pre-check, catches it)
    - Blank search criteria yield an empty page, never the full table
    - Deleting a company removes its participants, meetings, topics and votings (FK cascade)
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import CompanyType
from approval.core.errors import CompanyAlreadyExists, CompanyTypeNotFound
from approval.core.updater import apply_partial_update
from approval.models.company import Company
from approval.repositories import CompanyRepository
from approval.schemas.company import CompanyCreate, CompanyUpdate
from approval.services.verifier import Verifier, resolve_label

logger = logging.getLogger(__name__)


class CompanyService:
    """Company lifecycle and INN uniqueness."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.companies = CompanyRepository(db)
        self.verifier = Verifier(db)

    async def create(self, body: CompanyCreate) -> Company:
        company_type = resolve_label(CompanyType, body.company_type, CompanyTypeNotFound)
        if await self.companies.get_by_inn(body.inn) is not None:
            raise CompanyAlreadyExists(body.title, body.inn)

        try:
            company = await self.companies.add(Company(
                title=body.title,
                inn=body.inn,
                company_type=company_type,
                has_board_of_directors=body.has_board_of_directors,
            ))
            await self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same INN
            await self.db.rollback()
            raise CompanyAlreadyExists(body.title, body.inn)
        logger.info(
            f"Company created: {company.title}",
            extra={"company_id": company.id},
        )
        return company

    async def get(self, company_id: int) -> Company:
        return await self.verifier.verify_company(company_id)

    async def list_page(self, page: int, limit: int) -> tuple[list[Company], int]:
        return await self.companies.list_page(page, limit)

    async def search(
        self, criteria: str | None, page: int, limit: int,
    ) -> tuple[list[Company], int]:
        criteria = (criteria or "").strip()
        if not criteria:
            return [], 0
        return await self.companies.search(criteria, page, limit)

    async def update(self, company_id: int, body: CompanyUpdate) -> Company:
        company = await self.verifier.verify_company(company_id)

        if body.inn is not None and body.inn != company.inn:
            other = await self.companies.get_by_inn(body.inn)
            if other is not None and other.id != company.id:
                raise CompanyAlreadyExists(other.title, body.inn)
        if body.company_type is not None:
            company.company_type = resolve_label(
                CompanyType, body.company_type, CompanyTypeNotFound,
            )

        apply_partial_update(company, body.model_dump(exclude={"company_type"}))
        inn = company.inn
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise CompanyAlreadyExists(body.title, inn)
        logger.info("Company updated", extra={"company_id": company.id})
        return company

    async def delete(self, company_id: int) -> None:
        company = await self.verifier.verify_company(company_id)
        await self.companies.delete(company)
        await self.db.commit()
        logger.warning("Company deleted", extra={"company_id": company_id})
