"""Repositories - async data access over an AsyncSession, one class per aggregate.

Invariants:
    - Repositories never commit; services own the transaction boundary
    - Paged queries return (items, total) where total ignores paging
    - Queries use the SQLAlchemy 2.0 select() API only
"""

from approval.repositories.company import CompanyRepository  # noqa: F401
from approval.repositories.participant import ParticipantRepository  # noqa: F401
from approval.repositories.meeting import MeetingRepository  # noqa: F401
from approval.repositories.meeting_participant import MeetingParticipantRepository  # noqa: F401
from approval.repositories.topic import TopicRepository  # noqa: F401
from approval.repositories.voting import VoterRepository, VotingRepository  # noqa: F401
