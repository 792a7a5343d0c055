"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

import pytest

from domain.entities.group import GroupMember, GroupRole
from domain.entities.prayer import PrayerItem
from domain.services.reaction_ledger import ReactionLedger
from tests.conftest import FrozenClock


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.groups = AsyncMock()
        self.prayer_items = AsyncMock()
        self.prayer_reactions = AsyncMock()
        self.prayer_updates = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


def member_of(group_id: UUID, user_id: UUID, role: GroupRole = GroupRole.MEMBER) -> GroupMember:
    return GroupMember(group_id=group_id, user_id=user_id, role=role)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def group_id() -> UUID:
    """A random group ID."""
    return uuid4()


@pytest.fixture
def author_id() -> UUID:
    """A random author ID (distinct from user_id)."""
    return uuid4()


@pytest.fixture
def item(group_id: UUID, author_id: UUID) -> PrayerItem:
    return PrayerItem(
        group_id=group_id,
        author_id=author_id,
        title="Surgery next week",
        content="Please pray for my mother's surgery.",
        author_name="Alice",
        group_name="Morning Prayer",
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 3, 10, 9, 0, tzinfo=ZoneInfo("Asia/Seoul")))


@pytest.fixture
def ledger(frozen_clock: FrozenClock) -> ReactionLedger:
    return ReactionLedger(frozen_clock, reference_timezone="Asia/Seoul")
