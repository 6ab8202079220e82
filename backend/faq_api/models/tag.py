"""Tag ORM model."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from faq_api.models.base import Base, IntIdMixin, SoftDeleteMixin, TimestampMixin
from faq_api.models.faq_tag import faq_tags


class Tag(Base, IntIdMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "tags"

    tag_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    faqs = relationship("FAQ", secondary=faq_tags, back_populates="tags", lazy="raise_on_sql")

    def __repr__(self) -> str:
        return f"<Tag id={self.id} tag_name={self.tag_name!r}>"
