"""Tag request/response schemas."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from faq_api.models.base import MAX_ID


class TagCreate(BaseModel):
    tag_name: str = ""
    category: str = ""

    @field_validator("tag_name", "category", mode="before")
    @classmethod
    def _null_as_blank(cls, value):
        # null binds like an absent key
        return "" if value is None else value


class TagUpdate(BaseModel):
    tag_name: str | None = None
    category: str | None = None


class TagRef(BaseModel):
    """Reference to an already existing tag, used inside FAQ payloads."""
    id: int = Field(ge=1, le=MAX_ID)


class TagResponse(BaseModel):
    id: int
    tag_name: str
    category: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    model_config = {"from_attributes": True}
