"""FAQ data access layer.

Tags are eager-loaded with a ``selectin`` strategy: one query for the FAQ rows,
then one ``SELECT ... WHERE faq_id IN (...)`` for every tag of every FAQ in the
result. Soft-deleted tags are filtered out of the loaded collections.
"""
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from faq_api.models.base import utcnow
from faq_api.models.faq import FAQ
from faq_api.models.tag import Tag


def _active_faqs() -> Select:
    return (
        select(FAQ)
        .where(FAQ.deleted_at.is_(None))
        .options(selectinload(FAQ.tags.and_(Tag.deleted_at.is_(None))))
    )


async def get_by_id(db: AsyncSession, faq_id: int) -> FAQ | None:
    return (await db.execute(_active_faqs().where(FAQ.id == faq_id))).scalar_one_or_none()


async def list_with_tags(db: AsyncSession) -> list[FAQ]:
    rows = (await db.execute(_active_faqs().order_by(FAQ.id))).scalars().all()
    return list(rows)


async def list_by_tag_name(db: AsyncSession, tag_name: str) -> list[FAQ]:
    q = _active_faqs().where(
        FAQ.tags.any((Tag.tag_name == tag_name) & Tag.deleted_at.is_(None))
    )
    rows = (await db.execute(q.order_by(FAQ.id))).scalars().all()
    return list(rows)


async def create(db: AsyncSession, faq: FAQ) -> FAQ:
    db.add(faq)
    await db.flush()
    return faq


async def update(db: AsyncSession, faq: FAQ) -> FAQ:
    await db.flush()
    return faq


async def soft_delete(db: AsyncSession, faq: FAQ) -> FAQ:
    faq.deleted_at = utcnow()
    await db.flush()
    return faq
