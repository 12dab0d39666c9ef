"""Paged query execution - one COUNT plus one windowed SELECT."""

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


async def fetch_page(
    db: AsyncSession, query: Select, page: int, limit: int,
) -> tuple[list[Any], int]:
    """Run query for zero-based page of size limit. Returns (items, total)."""
    count_query = select(func.count()).select_from(
        query.order_by(None).subquery(),
    )
    total = (await db.execute(count_query)).scalar_one()
    result = await db.execute(query.offset(page * limit).limit(limit))
    return list(result.scalars().all()), total
