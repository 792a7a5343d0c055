"""Unit tests for the daily reaction ledger."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

import pytest

from core.exceptions import AlreadyReactedError
from domain.entities.prayer import PrayerReaction, Reactor
from domain.services.reaction_ledger import ReactionLedger
from tests.conftest import FrozenClock
from tests.unit.conftest import FakeUnitOfWork

SEOUL = ZoneInfo("Asia/Seoul")


class InMemoryReactions:
    """Reaction repository over a list, with the daily unique key enforced."""

    def __init__(self) -> None:
        self.rows: list[PrayerReaction] = []

    async def exists_between(
        self, prayer_item_id: UUID, user_id: UUID, start: datetime, end: datetime
    ) -> bool:
        return any(
            r.prayer_item_id == prayer_item_id
            and r.user_id == user_id
            and start <= r.reacted_at < end
            for r in self.rows
        )

    async def add(self, reaction: PrayerReaction) -> PrayerReaction:
        key = (reaction.prayer_item_id, reaction.user_id, reaction.reacted_at)
        if any((r.prayer_item_id, r.user_id, r.reacted_at) == key for r in self.rows):
            raise AlreadyReactedError(str(reaction.prayer_item_id))
        self.rows.append(reaction)
        return reaction

    async def count_for_item(self, prayer_item_id: UUID) -> int:
        return sum(1 for r in self.rows if r.prayer_item_id == prayer_item_id)

    async def list_reactors(self, prayer_item_id: UUID) -> list[Reactor]:
        rows = [r for r in self.rows if r.prayer_item_id == prayer_item_id]
        rows.sort(key=lambda r: r.reacted_at, reverse=True)
        return [Reactor(user_id=r.user_id, display_name="Bob", reacted_at=r.reacted_at) for r in rows]


@pytest.fixture
def reactions(uow: FakeUnitOfWork) -> InMemoryReactions:
    repo = InMemoryReactions()
    uow.prayer_reactions = repo
    return repo


class TestDayBucket:
    def test_bucket_is_local_midnight(self, ledger: ReactionLedger):
        bucket = ledger.day_bucket(datetime(2026, 3, 10, 23, 59, 59, tzinfo=SEOUL))

        assert bucket == datetime(2026, 3, 10, tzinfo=SEOUL)

    def test_utc_input_is_converted_before_truncating(self, ledger: ReactionLedger):
        # 16:00 UTC on the 10th is already 01:00 on the 11th in Seoul
        moment = datetime(2026, 3, 10, 16, 0, tzinfo=ZoneInfo("UTC"))

        assert ledger.day_bucket(moment) == datetime(2026, 3, 11, tzinfo=SEOUL)

    def test_naive_input_is_reference_wall_time(self, ledger: ReactionLedger):
        assert ledger.day_bucket(datetime(2026, 3, 10, 0, 0, 1)) == datetime(
            2026, 3, 10, tzinfo=SEOUL
        )

    def test_window_is_stored_as_naive_utc(self, ledger: ReactionLedger):
        start, end = ledger.day_window(datetime(2026, 3, 10, 9, 0, tzinfo=SEOUL))

        assert start == datetime(2026, 3, 9, 15, 0)
        assert end == datetime(2026, 3, 10, 15, 0)
        assert start.tzinfo is None

    def test_defaults_to_clock(self, ledger: ReactionLedger, frozen_clock: FrozenClock):
        frozen_clock.set(datetime(2026, 5, 1, 12, 0, tzinfo=SEOUL))

        assert ledger.day_bucket() == datetime(2026, 5, 1, tzinfo=SEOUL)


class TestRecordReaction:
    @pytest.mark.asyncio
    async def test_first_reaction_returns_total(
        self, ledger: ReactionLedger, uow: FakeUnitOfWork, reactions: InMemoryReactions
    ):
        item_id, user_id = uuid4(), uuid4()

        count = await ledger.record_reaction(uow, item_id, user_id)

        assert count == 1
        assert reactions.rows[0].reacted_at == datetime(2026, 3, 9, 15, 0)

    @pytest.mark.asyncio
    async def test_second_reaction_same_day_is_rejected(
        self,
        ledger: ReactionLedger,
        uow: FakeUnitOfWork,
        reactions: InMemoryReactions,
        frozen_clock: FrozenClock,
    ):
        item_id, user_id = uuid4(), uuid4()
        await ledger.record_reaction(uow, item_id, user_id)
        frozen_clock.set(frozen_clock.now() + timedelta(hours=10))

        with pytest.raises(AlreadyReactedError):
            await ledger.record_reaction(uow, item_id, user_id)

        assert len(reactions.rows) == 1

    @pytest.mark.asyncio
    async def test_count_includes_other_users_and_days(
        self,
        ledger: ReactionLedger,
        uow: FakeUnitOfWork,
        reactions: InMemoryReactions,
        frozen_clock: FrozenClock,
    ):
        item_id = uuid4()
        await ledger.record_reaction(uow, item_id, uuid4())
        frozen_clock.set(frozen_clock.now() + timedelta(days=1))
        await ledger.record_reaction(uow, item_id, uuid4())

        count = await ledger.record_reaction(uow, item_id, uuid4())

        assert count == 3

    @pytest.mark.asyncio
    async def test_day_boundary_resets_today_flag(
        self,
        ledger: ReactionLedger,
        uow: FakeUnitOfWork,
        reactions: InMemoryReactions,
        frozen_clock: FrozenClock,
    ):
        item_id, user_id = uuid4(), uuid4()
        frozen_clock.set(datetime(2026, 3, 10, 23, 59, 59, tzinfo=SEOUL))
        await ledger.record_reaction(uow, item_id, user_id)
        assert await ledger.has_reacted_today(uow, item_id, user_id) is True

        frozen_clock.set(datetime(2026, 3, 11, 0, 0, 1, tzinfo=SEOUL))

        assert await ledger.has_reacted_today(uow, item_id, user_id) is False
        assert await ledger.record_reaction(uow, item_id, user_id) == 2

    @pytest.mark.asyncio
    async def test_three_days_keep_three_rows(
        self,
        ledger: ReactionLedger,
        uow: FakeUnitOfWork,
        reactions: InMemoryReactions,
        frozen_clock: FrozenClock,
    ):
        item_id, user_id = uuid4(), uuid4()
        start = frozen_clock.now()

        for day in range(3):
            frozen_clock.set(start + timedelta(days=day))
            await ledger.record_reaction(uow, item_id, user_id)

        reactors = await ledger.reactors_of(uow, item_id)

        assert len(reactors) == 3
        assert all(r.user_id == user_id for r in reactors)
        assert reactors[0].reacted_at > reactors[1].reacted_at > reactors[2].reacted_at

    @pytest.mark.asyncio
    async def test_store_conflict_propagates(
        self, ledger: ReactionLedger, uow: FakeUnitOfWork
    ):
        # A concurrent insert won the race after the existence check passed.
        uow.prayer_reactions.exists_between.return_value = False
        uow.prayer_reactions.add.side_effect = AlreadyReactedError("x")

        with pytest.raises(AlreadyReactedError):
            await ledger.record_reaction(uow, uuid4(), uuid4())

        uow.prayer_reactions.count_for_item.assert_not_called()
