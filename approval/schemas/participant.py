"""Participant Schemas - owners and board members of a company.

Invariants:
    - share is a percentage in [0, 100]
    - company_id in the body is optional; the company in the URL always wins
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.core.domain_types import ParticipantType
from approval.schemas.common import strip_optional, strip_required


class ParticipantCreate(BaseModel):
    name: str = Field(max_length=255)
    share: float = Field(ge=0, le=100)
    company_id: int | None = None
    type: str
    is_active: bool = True

    @field_validator("name", "type")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return strip_required(v)


class ParticipantUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    share: float | None = Field(None, ge=0, le=100)
    type: str | None = None
    is_active: bool | None = None

    @field_validator("name", "type")
    @classmethod
    def blank_is_absent(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ParticipantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    share: float
    company_id: int
    type: ParticipantType
    is_active: bool
