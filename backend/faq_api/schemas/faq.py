"""FAQ request/response schemas."""
from datetime import datetime

from pydantic import BaseModel, field_validator

from faq_api.schemas.tag import TagRef, TagResponse


class FAQCreate(BaseModel):
    question: str = ""
    answer: str = ""
    tags: list[TagRef] | None = None

    @field_validator("question", "answer", mode="before")
    @classmethod
    def _null_as_blank(cls, value):
        return "" if value is None else value


class FAQUpdate(BaseModel):
    """Partial FAQ document bound onto the stored record.

    Only keys present in the request overwrite stored values; ``tags``, when
    given, replaces the whole association set.
    """
    question: str | None = None
    answer: str | None = None
    tags: list[TagRef] | None = None


class FAQResponse(BaseModel):
    id: int
    question: str
    answer: str
    tags: list[TagResponse] = []
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    model_config = {"from_attributes": True}
