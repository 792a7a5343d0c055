"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

# Disable rate limiting and point the default engine at SQLite in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import (
    Base,
    GroupMemberModel,
    GroupModel,
    ProfileModel,
)

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SEOUL = ZoneInfo("Asia/Seoul")


class FrozenClock:
    """Clock whose time only moves when a test sets it."""

    def __init__(self, now: datetime | None = None) -> None:
        self.current = now or datetime.now(SEOUL)

    def now(self) -> datetime:
        return self.current

    def set(self, now: datetime) -> None:
        self.current = now


@dataclass
class GroupFixture:
    """A seeded group: author and member are plain members, admin is admin."""

    group_id: UUID
    name: str
    author: TokenUser
    admin: TokenUser
    member: TokenUser
    outsider: TokenUser


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables, one per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 3, 10, 9, 0, tzinfo=SEOUL))


def _user(name: str) -> TokenUser:
    return TokenUser(
        id=uuid4(),
        email=f"{name.lower()}@example.com",
        display_name=name,
    )


@pytest.fixture
async def prayer_group(
    session_factory: async_sessionmaker[AsyncSession],
) -> GroupFixture:
    """Seed four profiles and one group with three of them as members."""
    fixture = GroupFixture(
        group_id=uuid4(),
        name="Morning Prayer",
        author=_user("Alice"),
        admin=_user("Bob"),
        member=_user("Carol"),
        outsider=_user("Dave"),
    )

    async with session_factory() as session:
        for user in (fixture.author, fixture.admin, fixture.member, fixture.outsider):
            session.add(
                ProfileModel(
                    id=user.id,
                    email=user.email,
                    display_name=user.display_name,
                )
            )
        session.add(GroupModel(id=fixture.group_id, name=fixture.name))
        await session.flush()
        session.add_all(
            [
                GroupMemberModel(
                    group_id=fixture.group_id, user_id=fixture.author.id, role="member"
                ),
                GroupMemberModel(
                    group_id=fixture.group_id, user_id=fixture.admin.id, role="admin"
                ),
                GroupMemberModel(
                    group_id=fixture.group_id, user_id=fixture.member.id, role="member"
                ),
            ]
        )
        await session.commit()

    return fixture


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_headers_for(
    auth_provider: JWTAuthProvider,
) -> Callable[[TokenUser], dict[str, str]]:
    """Build Authorization headers carrying a real token for any user."""

    def _headers(user: TokenUser) -> dict[str, str]:
        return {"Authorization": f"Bearer {auth_provider.create_token(user)}"}

    return _headers


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no overrides)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
    clock: FrozenClock,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client wired to the per-test database and frozen clock.

    Requests authenticate through the real bearer-token path; pass headers
    from ``auth_headers_for`` to act as a given user.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_prayer_item_service,
        get_prayer_reaction_service,
        get_prayer_update_service,
    )
    from domain.services.prayer_item_service import PrayerItemService
    from domain.services.prayer_reaction_service import PrayerReactionService
    from domain.services.prayer_update_service import PrayerUpdateService
    from domain.services.reaction_ledger import ReactionLedger
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    ledger = ReactionLedger(clock, reference_timezone="Asia/Seoul")

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_prayer_item_service] = lambda: PrayerItemService(
        test_uow_factory, ledger=ledger
    )
    app.dependency_overrides[get_prayer_reaction_service] = lambda: PrayerReactionService(
        test_uow_factory, ledger=ledger
    )
    app.dependency_overrides[get_prayer_update_service] = lambda: PrayerUpdateService(
        test_uow_factory
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
