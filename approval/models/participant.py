"""Participant ORM - an owner or board member of a company.

Invariants:
    - Always belongs to a Company (company_id FK, cascade on company delete)
    - share is a percentage in [0, 100]
    - is_active=False marks a soft-deleted participant that still has meeting history
"""

from sqlalchemy import Boolean, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from approval.core.domain_types import ParticipantType
from approval.db.base import Base


class Participant(Base):
    __tablename__ = "participant"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    share: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("company.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    type: Mapped[ParticipantType] = mapped_column(
        Enum(ParticipantType, native_enum=False, length=20), nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
