"""Voter ORM - one meeting participant's ballot on one topic.

Invariants:
    - Belongs to a Voting and a MeetingParticipant; removed with either
    - topic_id duplicates voting.topic_id for direct per-topic lookups
    - vote starts as NOT_VOTED
    - meeting_participant (and its participant) loaded eagerly for share-weighted tallies
"""

from sqlalchemy import Boolean, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.core.domain_types import VoteType
from approval.db.base import Base


class Voter(Base):
    __tablename__ = "voter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    voting_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("voting.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    meeting_participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("meeting_participant.id", ondelete="CASCADE"),
        nullable=False,
    )
    topic_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("topic.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    vote: Mapped[VoteType] = mapped_column(
        Enum(VoteType, native_enum=False, length=20),
        nullable=False, default=VoteType.NOT_VOTED,
    )
    is_related_party_deal: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    meeting_participant: Mapped["MeetingParticipant"] = relationship(
        "MeetingParticipant", lazy="selectin",
    )
