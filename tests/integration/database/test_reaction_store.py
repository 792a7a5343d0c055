"""Store-level tests for the daily reaction uniqueness constraint."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import AlreadyReactedError
from domain.entities.prayer import PrayerItem, PrayerReaction
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from tests.conftest import GroupFixture

DAY = datetime(2026, 3, 9, 15, 0)


@pytest.fixture
async def stored_item(
    session_factory: async_sessionmaker[AsyncSession], prayer_group: GroupFixture
) -> PrayerItem:
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        item = await uow.prayer_items.create(
            PrayerItem(
                group_id=prayer_group.group_id,
                author_id=prayer_group.author.id,
                title="Recovery",
                content="Recovering from knee surgery.",
            )
        )
        await uow.commit()
    return item


class TestReactionUniqueness:
    @pytest.mark.asyncio
    async def test_duplicate_bucket_insert_becomes_conflict(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        prayer_group: GroupFixture,
        stored_item: PrayerItem,
    ):
        user_id = prayer_group.member.id
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.prayer_reactions.add(
                PrayerReaction(prayer_item_id=stored_item.id, user_id=user_id, reacted_at=DAY)
            )
            await uow.commit()

        # Skips the existence check, as a concurrent request would.
        with pytest.raises(AlreadyReactedError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.prayer_reactions.add(
                    PrayerReaction(
                        prayer_item_id=stored_item.id, user_id=user_id, reacted_at=DAY
                    )
                )

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.prayer_reactions.count_for_item(stored_item.id) == 1

    @pytest.mark.asyncio
    async def test_other_days_and_users_are_independent(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        prayer_group: GroupFixture,
        stored_item: PrayerItem,
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            for reacted_at, user in (
                (DAY, prayer_group.member),
                (DAY + timedelta(days=1), prayer_group.member),
                (DAY, prayer_group.admin),
            ):
                await uow.prayer_reactions.add(
                    PrayerReaction(
                        prayer_item_id=stored_item.id, user_id=user.id, reacted_at=reacted_at
                    )
                )
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.prayer_reactions.count_for_item(stored_item.id) == 3
            assert await uow.prayer_reactions.exists_between(
                stored_item.id, prayer_group.member.id, DAY, DAY + timedelta(days=1)
            )
            assert not await uow.prayer_reactions.exists_between(
                stored_item.id,
                prayer_group.member.id,
                DAY + timedelta(days=2),
                DAY + timedelta(days=3),
            )
            reactors = await uow.prayer_reactions.list_reactors(stored_item.id)

        assert reactors[0].reacted_at == DAY + timedelta(days=1)
        assert {r.display_name for r in reactors} == {"Carol", "Bob"}
