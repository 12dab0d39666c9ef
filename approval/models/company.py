"""Company ORM - the legal entity that owns participants and meetings.

Invariants:
    - inn is unique across all companies (10 digits, checked at the API boundary)
    - company_type stored as its enum code
"""

from sqlalchemy import BigInteger, Boolean, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from approval.core.domain_types import CompanyType
from approval.db.base import Base


class Company(Base):
    """Company aggregate root."""
    __tablename__ = "company"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    inn: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True)
    company_type: Mapped[CompanyType] = mapped_column(
        Enum(CompanyType, native_enum=False, length=20), nullable=False,
    )
    has_board_of_directors: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
