"""Topic Schemas - agenda items."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.schemas.common import strip_optional, strip_required


class TopicCreate(BaseModel):
    title: str = Field(max_length=1024)
    meeting_id: int | None = None

    @field_validator("title")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return strip_required(v)


class TopicUpdate(BaseModel):
    title: str | None = Field(None, max_length=1024)

    @field_validator("title")
    @classmethod
    def blank_is_absent(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    meeting_id: int
