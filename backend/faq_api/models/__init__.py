"""SQLAlchemy ORM models - faqs, tags and their association table."""
from faq_api.models.base import Base, IntIdMixin, SoftDeleteMixin, TimestampMixin
from faq_api.models.faq_tag import faq_tags
from faq_api.models.faq import FAQ
from faq_api.models.tag import Tag

__all__ = [
    "Base",
    "IntIdMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
    "faq_tags",
    "FAQ",
    "Tag",
]
