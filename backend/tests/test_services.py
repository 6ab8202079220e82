"""Service-layer tests: error translation and partial updates."""
import pytest
from sqlalchemy.exc import OperationalError

from faq_api.middleware.error_handler import NotFoundError, PayloadError, PersistenceError
from faq_api.repositories import faq_repository, tag_repository
from faq_api.schemas.faq import FAQCreate, FAQUpdate
from faq_api.schemas.tag import TagCreate, TagRef
from faq_api.services import faq_service, tag_service

pytestmark = pytest.mark.asyncio


async def test_create_and_get_faq(db_session):
    tag = await tag_service.create_tag(db_session, TagCreate(tag_name="billing", category="finance"))
    faq = await faq_service.create_faq(
        db_session, FAQCreate(question="Q", answer="A", tags=[TagRef(id=tag.id)])
    )
    await db_session.commit()

    loaded = await faq_service.get_faq(db_session, faq.id)
    assert loaded.question == "Q"
    assert [t.tag_name for t in loaded.tags] == ["billing"]


async def test_get_faq_missing(db_session):
    with pytest.raises(NotFoundError) as excinfo:
        await faq_service.get_faq(db_session, 1)
    assert excinfo.value.status_code == 404


async def test_get_tag_missing(db_session):
    with pytest.raises(NotFoundError) as excinfo:
        await tag_service.get_tag(db_session, 1)
    assert excinfo.value.detail == "Tag not found!"


async def test_resolve_refs_unknown(db_session):
    with pytest.raises(PayloadError):
        await tag_service.resolve_refs(db_session, [TagRef(id=5)])


async def test_update_faq_merges(db_session, make_faq):
    faq = await make_faq("Q1", "A1")
    loaded = await faq_service.get_faq(db_session, faq.id)
    updated = await faq_service.update_faq(db_session, loaded, FAQUpdate(question="Q2"))
    assert (updated.question, updated.answer) == ("Q2", "A1")


async def test_list_faqs_by_tag_missing(db_session):
    with pytest.raises(NotFoundError):
        await faq_service.list_faqs_by_tag(db_session, "nothing")


async def test_store_failure_becomes_persistence_error(db_session, monkeypatch):
    async def _broken(*_args, **_kwargs):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(faq_repository, "list_with_tags", _broken)
    with pytest.raises(PersistenceError) as excinfo:
        await faq_service.list_faqs(db_session)
    assert excinfo.value.detail == "Failed to fetch FAQs"


async def test_create_tag_failure(db_session, monkeypatch):
    async def _broken(*_args, **_kwargs):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(tag_repository, "create", _broken)
    with pytest.raises(PersistenceError) as excinfo:
        await tag_service.create_tag(db_session, TagCreate(tag_name="x"))
    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == "Failed to create tag"


async def test_store_failure_over_http_hides_cause(client, monkeypatch):
    async def _broken(*_args, **_kwargs):
        raise OperationalError("SELECT", {}, Exception("secret internals"))

    monkeypatch.setattr(tag_repository, "list_tags", _broken)
    resp = await client.get("/tags")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch tags"}
    assert "secret" not in resp.text
