"""Initial schema - company, participant, meeting, attendance, topic, voting, voter.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "company",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("inn", sa.BigInteger, nullable=False, unique=True),
        sa.Column("company_type", sa.String(20), nullable=False),
        sa.Column("has_board_of_directors", sa.Boolean, nullable=False, server_default="false"),
    )

    op.create_table(
        "participant",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("share", sa.Float, nullable=False, server_default="0"),
        sa.Column("company_id", sa.Integer, sa.ForeignKey("company.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
    )
    op.create_index("ix_participant_company_id", "participant", ["company_id"])

    op.create_table(
        "meeting",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company_id", sa.Integer, sa.ForeignKey("company.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(10), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("address", sa.String(512), nullable=False),
        sa.Column("secretary_id", sa.Integer, sa.ForeignKey("participant.id", ondelete="SET NULL"), nullable=True),
        sa.Column("chairman_id", sa.Integer, sa.ForeignKey("participant.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_index("ix_meeting_company_id", "meeting", ["company_id"])

    op.create_table(
        "meeting_participant",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("meeting_id", sa.Integer, sa.ForeignKey("meeting.id", ondelete="CASCADE"), nullable=False),
        sa.Column("participant_id", sa.Integer, sa.ForeignKey("participant.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_present", sa.Boolean, nullable=False, server_default="false"),
        sa.UniqueConstraint("meeting_id", "participant_id", name="meeting_participant_meeting_participant_uq"),
    )
    op.create_index("ix_meeting_participant_meeting_id", "meeting_participant", ["meeting_id"])
    op.create_index("ix_meeting_participant_participant_id", "meeting_participant", ["participant_id"])

    op.create_table(
        "topic",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(1024), nullable=False),
        sa.Column("meeting_id", sa.Integer, sa.ForeignKey("meeting.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_topic_meeting_id", "topic", ["meeting_id"])

    op.create_table(
        "voting",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("topic_id", sa.Integer, sa.ForeignKey("topic.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("is_accepted", sa.Boolean, nullable=False, server_default="false"),
    )

    op.create_table(
        "voter",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("voting_id", sa.Integer, sa.ForeignKey("voting.id", ondelete="CASCADE"), nullable=False),
        sa.Column("meeting_participant_id", sa.Integer, sa.ForeignKey("meeting_participant.id", ondelete="CASCADE"), nullable=False),
        sa.Column("topic_id", sa.Integer, sa.ForeignKey("topic.id", ondelete="CASCADE"), nullable=False),
        sa.Column("vote", sa.String(20), nullable=False, server_default="NOT_VOTED"),
        sa.Column("is_related_party_deal", sa.Boolean, nullable=False, server_default="false"),
    )
    op.create_index("ix_voter_voting_id", "voter", ["voting_id"])
    op.create_index("ix_voter_topic_id", "voter", ["topic_id"])


def downgrade() -> None:
    op.drop_table("voter")
    op.drop_table("voting")
    op.drop_table("topic")
    op.drop_table("meeting_participant")
    op.drop_table("meeting")
    op.drop_table("participant")
    op.drop_table("company")
