"""Tag business logic."""
import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faq_api.middleware.error_handler import NotFoundError, PayloadError, PersistenceError
from faq_api.models.tag import Tag
from faq_api.repositories import tag_repository
from faq_api.schemas.tag import TagCreate, TagRef, TagUpdate

logger = logging.getLogger(__name__)

TAG_NOT_FOUND = "Tag not found!"


async def create_tag(db: AsyncSession, data: TagCreate) -> Tag:
    tag = Tag(tag_name=data.tag_name, category=data.category, deleted_at=None)
    try:
        return await tag_repository.create(db, tag)
    except SQLAlchemyError as exc:
        logger.error("Error when creating tag: %s", exc)
        raise PersistenceError("Failed to create tag") from exc


async def list_tags(db: AsyncSession) -> list[Tag]:
    try:
        return await tag_repository.list_tags(db)
    except SQLAlchemyError as exc:
        logger.error("Error when fetching tags: %s", exc)
        raise PersistenceError("Failed to fetch tags") from exc


async def get_tag(db: AsyncSession, tag_id: int) -> Tag:
    try:
        tag = await tag_repository.get_by_id(db, tag_id)
    except SQLAlchemyError as exc:
        logger.error("Error when fetching tag %s: %s", tag_id, exc)
        raise PersistenceError("Failed to fetch tag") from exc
    if tag is None:
        raise NotFoundError(TAG_NOT_FOUND)
    return tag


async def update_tag(db: AsyncSession, tag: Tag, data: TagUpdate) -> Tag:
    # Fields left out of the request (or sent as null) keep their stored value.
    for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(tag, key, value)
    try:
        return await tag_repository.update(db, tag)
    except SQLAlchemyError as exc:
        logger.error("Error when updating tag %s: %s", tag.id, exc)
        raise PersistenceError("Failed to update tag") from exc


async def delete_tag(db: AsyncSession, tag: Tag) -> None:
    try:
        await tag_repository.soft_delete(db, tag)
    except SQLAlchemyError as exc:
        logger.error("Error when deleting tag %s: %s", tag.id, exc)
        raise PersistenceError("Failed to delete tag") from exc


async def resolve_refs(db: AsyncSession, refs: Iterable[TagRef]) -> list[Tag]:
    """Load the live tags behind ``refs``. Unknown or deleted ids are a payload error.

    Repeated ids collapse to a single tag. Never creates tags.
    """
    ids = {ref.id for ref in refs}
    tags = await tag_repository.get_many(db, ids)
    if len(tags) != len(ids):
        missing = sorted(ids - {t.id for t in tags})
        logger.info("Rejected unknown tag references: %s", missing)
        raise PayloadError()
    return tags
