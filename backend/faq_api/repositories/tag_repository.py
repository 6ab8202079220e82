"""Tag data access layer."""
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from faq_api.models.base import utcnow
from faq_api.models.tag import Tag


async def get_by_id(db: AsyncSession, tag_id: int) -> Tag | None:
    return (
        await db.execute(select(Tag).where(Tag.id == tag_id, Tag.deleted_at.is_(None)))
    ).scalar_one_or_none()


async def get_many(db: AsyncSession, tag_ids: Iterable[int]) -> list[Tag]:
    ids = set(tag_ids)
    if not ids:
        return []
    rows = (
        await db.execute(
            select(Tag).where(Tag.id.in_(ids), Tag.deleted_at.is_(None)).order_by(Tag.id)
        )
    ).scalars().all()
    return list(rows)


async def list_tags(db: AsyncSession) -> list[Tag]:
    rows = (
        await db.execute(select(Tag).where(Tag.deleted_at.is_(None)).order_by(Tag.id))
    ).scalars().all()
    return list(rows)


async def create(db: AsyncSession, tag: Tag) -> Tag:
    db.add(tag)
    await db.flush()
    return tag


async def update(db: AsyncSession, tag: Tag) -> Tag:
    await db.flush()
    return tag


async def soft_delete(db: AsyncSession, tag: Tag) -> Tag:
    tag.deleted_at = utcnow()
    await db.flush()
    return tag
