"""Voting ORM - the aggregate tally record of a topic.

Invariants:
    - Exactly one voting per topic (topic_id unique)
    - is_accepted reflects the last tally, False until a vote is made
"""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from approval.db.base import Base


class Voting(Base):
    __tablename__ = "voting"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("topic.id", ondelete="CASCADE"), nullable=False,
        unique=True,
    )
    is_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
