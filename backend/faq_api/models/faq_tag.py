"""Association table between FAQs and Tags."""
from sqlalchemy import Column, ForeignKey, Integer, Table

from faq_api.models.base import Base

# Composite primary key: a (faq_id, tag_id) pair can only appear once.
faq_tags = Table(
    "faq_tags",
    Base.metadata,
    Column("faq_id", Integer, ForeignKey("faqs.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)
