"""FAQ ORM model."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from faq_api.models.base import Base, IntIdMixin, SoftDeleteMixin, TimestampMixin
from faq_api.models.faq_tag import faq_tags


class FAQ(Base, IntIdMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(Text, nullable=False, default="")
    answer: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    # Loaded explicitly by the repository (selectin, soft-deleted tags filtered out).
    tags = relationship("Tag", secondary=faq_tags, back_populates="faqs", lazy="raise_on_sql")

    def __repr__(self) -> str:
        return f"<FAQ id={self.id} question={self.question[:30]!r}>"
