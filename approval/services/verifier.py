"""Ownership Verifier - resolves path coordinates and checks parent/child scoping.

Invariants:
    - A missing company, meeting, topic or participant raises its *NotFound error
    - A child under the wrong parent raises the matching *DoesNotBelongTo* error
    - Never mutates anything

Design Decisions:
    - Shared by every service: one place decides what "company/meeting/topic" in a URL means
    - resolve_label lives here too: unknown enum labels are "not found", same as records
"""

from sqlalchemy.ext.asyncio import AsyncSession

from approval.core.domain_types import LabeledEnum
from approval.core.errors import (
    CompanyNotFound, EnumLabelNotFound, MeetingDoesNotBelongToCompany,
    MeetingNotFound, ParticipantDoesNotBelongToCompany, ParticipantNotFound,
    TopicDoesNotBelongToMeeting, TopicNotFound,
)
from approval.models.company import Company
from approval.models.meeting import Meeting
from approval.models.participant import Participant
from approval.models.topic import Topic
from approval.repositories import (
    CompanyRepository, MeetingRepository, ParticipantRepository, TopicRepository,
)


def resolve_label(
    enum_cls: type[LabeledEnum], label: str | None,
    not_found: type[EnumLabelNotFound],
):
    """Enum member for a code or display label, or raise not_found(label)."""
    member = enum_cls.from_label(label)
    if member is None:
        raise not_found(label)
    return member


class Verifier:
    """Path coordinate lookups and ownership checks."""

    def __init__(self, db: AsyncSession):
        self.companies = CompanyRepository(db)
        self.meetings = MeetingRepository(db)
        self.participants = ParticipantRepository(db)
        self.topics = TopicRepository(db)

    async def verify_company(self, company_id: int) -> Company:
        company = await self.companies.get(company_id)
        if company is None:
            raise CompanyNotFound(company_id)
        return company

    async def verify_company_and_meeting(
        self, company_id: int, meeting_id: int | None,
    ) -> Meeting | None:
        """Company must exist; meeting (when given) must exist and belong to it."""
        if not await self.companies.exists(company_id):
            raise CompanyNotFound(company_id)
        if meeting_id is None:
            return None
        meeting = await self.meetings.get(meeting_id)
        if meeting is None:
            raise MeetingNotFound(meeting_id)
        if meeting.company_id != company_id:
            raise MeetingDoesNotBelongToCompany(company_id, meeting_id)
        return meeting

    async def verify_meeting(self, company_id: int, meeting_id: int) -> Meeting:
        return await self.verify_company_and_meeting(company_id, meeting_id)

    async def verify_topic(self, meeting: Meeting, topic_id: int) -> Topic:
        topic = await self.topics.get(topic_id)
        if topic is None:
            raise TopicNotFound(topic_id)
        if topic.meeting_id != meeting.id:
            raise TopicDoesNotBelongToMeeting(meeting.id, topic_id)
        return topic

    async def verify_participant(
        self, company_id: int, participant_id: int,
    ) -> Participant:
        participant = await self.participants.get(participant_id)
        if participant is None:
            raise ParticipantNotFound(participant_id)
        if participant.company_id != company_id:
            raise ParticipantDoesNotBelongToCompany(company_id, participant_id)
        return participant
