"""Company Repository - lookups, ordered listing and text search over companies."""

from sqlalchemy import String, cast, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from approval.models.company import Company
from approval.repositories.pagination import fetch_page


class CompanyRepository:
    """Company persistence and search."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, company_id: int) -> Company | None:
        return await self.db.get(Company, company_id)

    async def exists(self, company_id: int) -> bool:
        result = await self.db.execute(
            select(Company.id).where(Company.id == company_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_by_inn(self, inn: int) -> Company | None:
        result = await self.db.execute(select(Company).where(Company.inn == inn))
        return result.scalar_one_or_none()

    async def list_page(self, page: int, limit: int) -> tuple[list[Company], int]:
        query = select(Company).order_by(Company.title, Company.id)
        return await fetch_page(self.db, query, page, limit)

    async def search(
        self, criteria: str, page: int, limit: int,
    ) -> tuple[list[Company], int]:
        """Title (case-insensitive) or INN digits containing criteria."""
        query = (
            select(Company)
            .where(or_(
                Company.title.icontains(criteria, autoescape=True),
                cast(Company.inn, String).contains(criteria, autoescape=True),
            ))
            .order_by(Company.title, Company.id)
        )
        return await fetch_page(self.db, query, page, limit)

    async def add(self, company: Company) -> Company:
        self.db.add(company)
        await self.db.flush()
        return company

    async def delete(self, company: Company) -> None:
        await self.db.delete(company)
        await self.db.flush()
