"""Pytest configuration and fixtures."""

import random
from datetime import timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from applytrack.api.deps import get_application_submitter, get_job_search_provider
from applytrack.database import get_db
from applytrack.main import app
from applytrack.models import Base, Session, User
from applytrack.models.base import utcnow
from applytrack.providers import RandomOutcomeSubmitter, StaticJobSearchProvider


# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

USER_TOKEN = "token-user-1"
OTHER_TOKEN = "token-user-2"
EXPIRED_TOKEN = "token-expired"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def user(db_session) -> User:
    """User with a live bearer session."""
    user = User(id="user-1", name="Test User", email="test@example.com")
    db_session.add(user)
    db_session.add(
        Session(
            id="session-1",
            token=USER_TOKEN,
            user_id=user.id,
            expires_at=utcnow() + timedelta(days=1),
        )
    )
    db_session.add(
        Session(
            id="session-expired",
            token=EXPIRED_TOKEN,
            user_id=user.id,
            expires_at=utcnow() - timedelta(minutes=1),
        )
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def other_user(db_session) -> User:
    """Second user, used to check that data never leaks across owners."""
    user = User(id="user-2", name="Other User", email="other@example.com")
    db_session.add(user)
    db_session.add(
        Session(
            id="session-2",
            token=OTHER_TOKEN,
            user_id=user.id,
            expires_at=utcnow() + timedelta(days=1),
        )
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def client(session_maker, user, other_user) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the test database."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_job_search_provider] = lambda: StaticJobSearchProvider()
    app.dependency_overrides[get_application_submitter] = lambda: RandomOutcomeSubmitter(
        success_probability=1.0
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def other_auth_headers():
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def sample_resume_data():
    """Sample resume payload for testing."""
    return {
        "fileName": "resume.pdf",
        "resumeText": "Python and React developer with AWS experience",
        "fileSize": 2048,
        "fileType": "application/pdf",
    }


@pytest.fixture
def sample_job_data():
    """Sample job payload for testing."""
    return {
        "title": "Software Engineer",
        "company": "Test Company",
        "location": "Remote",
        "salary": "$100k-$150k",
        "type": "Full-time",
        "description": "We are looking for a software engineer...",
        "skills": ["Python", "FastAPI", "PostgreSQL"],
        "website": "Example.COM",
        "posted": "2 days ago",
    }
