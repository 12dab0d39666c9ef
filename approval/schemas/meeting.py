"""Meeting Schemas - meetings and meeting attendance.

Invariants:
    - date is an ISO date (YYYY-MM-DD)
    - address is non-blank, at most 512 characters
    - secretary_id/chairman_id reference participants of the same company
    - MeetingParticipantResponse.id is None for potential (not yet registered) participants
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.core.domain_types import MeetingType
from approval.schemas.common import strip_optional, strip_required
from approval.schemas.participant import ParticipantResponse


class MeetingCreate(BaseModel):
    company_id: int | None = None
    type: str
    date: datetime.date
    address: str = Field(max_length=512)
    secretary_id: int | None = None
    chairman_id: int | None = None

    @field_validator("type", "address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return strip_required(v)


class MeetingUpdate(BaseModel):
    type: str | None = None
    date: datetime.date | None = None
    address: str | None = Field(None, max_length=512)
    secretary_id: int | None = None
    chairman_id: int | None = None

    @field_validator("type", "address")
    @classmethod
    def blank_is_absent(cls, v: str | None) -> str | None:
        return strip_optional(v)


class MeetingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    type: MeetingType
    date: datetime.date
    address: str
    secretary_id: int | None = None
    chairman_id: int | None = None


# --- Attendance -----------------------------------------------------------------

class MeetingParticipantEntry(BaseModel):
    """One participant to register at a meeting."""
    participant_id: int
    meeting_id: int | None = None
    is_present: bool = False


class MeetingParticipantCreate(BaseModel):
    potential_participants: list[MeetingParticipantEntry]


class MeetingParticipantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    meeting_id: int
    participant: ParticipantResponse
    is_present: bool = False
