"""Meeting ORM - a board or general meeting held by a company.

Invariants:
    - Always belongs to a Company (company_id FK, cascade on company delete)
    - secretary/chairman are optional participants; deleting one clears the role
    - address is at most 512 characters
"""

import datetime

from sqlalchemy import Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from approval.core.domain_types import MeetingType
from approval.db.base import Base


class Meeting(Base):
    __tablename__ = "meeting"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("company.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    type: Mapped[MeetingType] = mapped_column(
        Enum(MeetingType, native_enum=False, length=10), nullable=False,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    secretary_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("participant.id", ondelete="SET NULL"), nullable=True,
    )
    chairman_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("participant.id", ondelete="SET NULL"), nullable=True,
    )
