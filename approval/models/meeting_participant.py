"""MeetingParticipant ORM - attendance of one participant at one meeting.

Invariants:
    - (meeting_id, participant_id) is unique
    - Removed together with its meeting or its participant
    - participant loaded eagerly (selectin) so responses can embed it
"""

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.db.base import Base


class MeetingParticipant(Base):
    __tablename__ = "meeting_participant"
    __table_args__ = (
        UniqueConstraint(
            "meeting_id", "participant_id",
            name="meeting_participant_meeting_participant_uq",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    meeting_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("meeting.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("participant.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    is_present: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    participant: Mapped["Participant"] = relationship(
        "Participant", lazy="selectin",
    )
