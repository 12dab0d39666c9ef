"""Topic ORM - an agenda item of a meeting, eligible for voting."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from approval.db.base import Base


class Topic(Base):
    __tablename__ = "topic"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(1024), nullable=False)
    meeting_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("meeting.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
