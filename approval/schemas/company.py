"""Company Schemas - create/update payloads and the public company shape.

Invariants:
    - inn must be exactly 10 digits (core/inn.py)
    - title and company_type are non-blank on create
    - CompanyUpdate fields are all optional; absent or blank fields are left untouched
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.core.domain_types import CompanyType
from approval.core.inn import INN_MESSAGE, is_valid_inn
from approval.schemas.common import strip_optional, strip_required


def _check_inn(v: int | None) -> int | None:
    if v is not None and not is_valid_inn(v):
        raise ValueError(INN_MESSAGE)
    return v


class CompanyCreate(BaseModel):
    title: str = Field(max_length=255)
    inn: int
    company_type: str
    has_board_of_directors: bool

    @field_validator("title", "company_type")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("inn")
    @classmethod
    def valid_inn(cls, v: int) -> int:
        return _check_inn(v)


class CompanyUpdate(BaseModel):
    title: str | None = Field(None, max_length=255)
    inn: int | None = None
    company_type: str | None = None
    has_board_of_directors: bool | None = None

    @field_validator("title", "company_type")
    @classmethod
    def blank_is_absent(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("inn")
    @classmethod
    def valid_inn(cls, v: int | None) -> int | None:
        return _check_inn(v)


class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    inn: int
    company_type: CompanyType
    has_board_of_directors: bool
