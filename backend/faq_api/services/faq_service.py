"""FAQ business logic."""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faq_api.middleware.error_handler import NotFoundError, PersistenceError
from faq_api.models.base import utcnow
from faq_api.models.faq import FAQ
from faq_api.repositories import faq_repository
from faq_api.schemas.faq import FAQCreate, FAQUpdate
from faq_api.services.tag_service import resolve_refs

logger = logging.getLogger(__name__)

FAQ_NOT_FOUND = "Record not found!"


async def create_faq(db: AsyncSession, data: FAQCreate) -> FAQ:
    try:
        tags = await resolve_refs(db, data.tags or [])
        faq = FAQ(question=data.question, answer=data.answer, tags=tags, deleted_at=None)
        return await faq_repository.create(db, faq)
    except SQLAlchemyError as exc:
        logger.error("Error when saving new FAQ: %s", exc)
        raise PersistenceError("Failed to save new FAQ.") from exc


async def list_faqs(db: AsyncSession) -> list[FAQ]:
    try:
        return await faq_repository.list_with_tags(db)
    except SQLAlchemyError as exc:
        logger.error("Error when fetching FAQs: %s", exc)
        raise PersistenceError("Failed to fetch FAQs") from exc


async def list_faqs_by_tag(db: AsyncSession, tag_name: str) -> list[FAQ]:
    try:
        faqs = await faq_repository.list_by_tag_name(db, tag_name)
    except SQLAlchemyError as exc:
        logger.error("Error when querying FAQs by tag: %s", exc)
        raise PersistenceError("Failed to retrieve FAQs by tag") from exc
    if not faqs:
        raise NotFoundError("No FAQs found with the specified tag")
    return faqs


async def get_faq(db: AsyncSession, faq_id: int) -> FAQ:
    try:
        faq = await faq_repository.get_by_id(db, faq_id)
    except SQLAlchemyError as exc:
        logger.error("Error when fetching FAQ %s: %s", faq_id, exc)
        raise PersistenceError("Failed to fetch FAQ") from exc
    if faq is None:
        raise NotFoundError(FAQ_NOT_FOUND)
    return faq


async def update_faq(db: AsyncSession, faq: FAQ, data: FAQUpdate) -> FAQ:
    """Bind ``data`` onto the loaded ``faq`` and save it.

    Keys missing from the request (or null) leave the stored value alone, an
    empty string overwrites it. A ``tags`` list replaces the associations.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"tags"})
    try:
        if data.tags is not None:
            faq.tags = await resolve_refs(db, data.tags)
            # association-only changes do not trigger the column onupdate
            faq.updated_at = utcnow()
        for key, value in changes.items():
            setattr(faq, key, value)
        return await faq_repository.update(db, faq)
    except SQLAlchemyError as exc:
        logger.error("Error when updating FAQ %s: %s", faq.id, exc)
        raise PersistenceError("Failed to update FAQ") from exc


async def delete_faq(db: AsyncSession, faq: FAQ) -> None:
    try:
        await faq_repository.soft_delete(db, faq)
    except SQLAlchemyError as exc:
        logger.error("Error when deleting FAQ %s: %s", faq.id, exc)
        raise PersistenceError("Failed to delete FAQ") from exc
