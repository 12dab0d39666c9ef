"""ORM Models - SQLAlchemy declarative models for all governance entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company is the aggregate root; every other record is reachable from a company
    - Child rows are removed by ON DELETE CASCADE at the database level

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from approval.models.company import Company  # noqa: F401
from approval.models.participant import Participant  # noqa: F401
from approval.models.meeting import Meeting  # noqa: F401
from approval.models.meeting_participant import MeetingParticipant  # noqa: F401
from approval.models.topic import Topic  # noqa: F401
from approval.models.voting import Voting  # noqa: F401
from approval.models.voter import Voter  # noqa: F401
