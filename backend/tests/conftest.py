"""Shared test fixtures with in-memory SQLite."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from faq_api.database import build_engine, init_models
from faq_api.dependencies import get_db
from faq_api.main import app
from faq_api.models import FAQ, Tag

# In-memory SQLite for tests; StaticPool keeps every session on one connection.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def override_get_db(session_factory):
    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def client(override_get_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_tag(db_session: AsyncSession):
    """Insert a tag directly, bypassing the API."""
    async def _make(tag_name: str = "billing", category: str = "finance") -> Tag:
        tag = Tag(tag_name=tag_name, category=category, deleted_at=None)
        db_session.add(tag)
        await db_session.commit()
        return tag
    return _make


@pytest.fixture
def make_faq(db_session: AsyncSession):
    """Insert an FAQ (optionally with tags) directly, bypassing the API."""
    async def _make(question: str = "Q1", answer: str = "A1", tags: list[Tag] | None = None) -> FAQ:
        faq = FAQ(question=question, answer=answer, tags=list(tags or []), deleted_at=None)
        db_session.add(faq)
        await db_session.commit()
        return faq
    return _make
