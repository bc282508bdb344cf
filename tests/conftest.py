"""
Test infrastructure for the Blog API.

Strategy
--------
- SQLite in-memory via aiosqlite removes the need for a running Postgres
  instance, keeping the suite fast and self-contained.
- StaticPool makes every session share the one in-memory connection; a new
  connection would see an empty database.
- The app's get_db dependency is overridden so every request uses the test
  session factory; as in production, the services commit their own writes.
- All tables are created before each test and dropped after it.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from blog_api.database import Base, get_db
from blog_api.main import app
from blog_api.middleware import install_query_counter
from blog_api.repository import SQLAlchemyBlogRepository
from blog_api.services.article_service import ArticleService
from blog_api.services.comment_service import CommentService

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override — replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live session for tests that drive the repository or services directly."""
    async with async_session_test() as session:
        yield session


@pytest.fixture
def repository(db_session: AsyncSession) -> SQLAlchemyBlogRepository:
    return SQLAlchemyBlogRepository(db_session)


@pytest.fixture
def article_service(repository: SQLAlchemyBlogRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.fixture
def comment_service(
    repository: SQLAlchemyBlogRepository, article_service: ArticleService
) -> CommentService:
    return CommentService(repository, article_service)


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """An httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
