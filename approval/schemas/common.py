"""Shared schema pieces - pagination envelope and text normalizers."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of results. page is zero-based."""
    items: list[T] = []
    page: int = 0
    limit: int = 10
    total: int = 0


def strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


def strip_optional(v: str | None) -> str | None:
    """Blank optional text is treated as absent (partial updates skip it)."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def page_of(schema: type[BaseModel], items: list, page: int, limit: int, total: int) -> Page:
    """Wrap ORM rows into a Page of schema instances."""
    return Page[schema](
        items=[schema.model_validate(item) for item in items],
        page=page, limit=limit, total=total,
    )
