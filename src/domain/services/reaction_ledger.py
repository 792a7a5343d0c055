"""Daily prayer reaction ledger.

A user may pray for an item at most once per calendar day of the reference
timezone. Every accepted reaction is kept, so the ledger is a history rather
than a toggle.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID
from zoneinfo import ZoneInfo

import structlog

from core.clock import Clock
from core.config import settings
from core.exceptions import AlreadyReactedError
from domain.entities.prayer import PrayerReaction, Reactor
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ReactionLedger:
    """Enforces and answers the once-per-day prayer rule."""

    def __init__(
        self,
        clock: Clock,
        reference_timezone: str = settings.reference_timezone,
    ) -> None:
        self._clock = clock
        self._tz = ZoneInfo(reference_timezone)

    def day_bucket(self, now: datetime | None = None) -> datetime:
        """Midnight that starts the reference-timezone day containing ``now``.

        Naive inputs are read as reference-timezone wall time. The result is
        timezone-aware.
        """
        if now is None:
            now = self._clock.now()
        if now.tzinfo is None:
            local = now.replace(tzinfo=self._tz)
        else:
            local = now.astimezone(self._tz)
        return local.replace(hour=0, minute=0, second=0, microsecond=0)

    def day_window(self, now: datetime | None = None) -> tuple[datetime, datetime]:
        """Half-open ``[start, end)`` window of the current day, as stored (naive UTC)."""
        start = self.day_bucket(now)
        end = start + timedelta(days=1)
        return _to_storage(start), _to_storage(end)

    async def has_reacted_today(
        self, uow: IUnitOfWork, prayer_item_id: UUID, user_id: UUID
    ) -> bool:
        start, end = self.day_window()
        return await uow.prayer_reactions.exists_between(
            prayer_item_id, user_id, start, end
        )

    async def record_reaction(
        self, uow: IUnitOfWork, prayer_item_id: UUID, user_id: UUID
    ) -> int:
        """Append today's reaction and return the item's all-time total.

        Runs inside the caller's unit of work; the caller commits.

        Raises:
            AlreadyReactedError: if the user already prayed for the item in
                the current day window. A concurrent duplicate that slips past
                the read is still rejected by the store's unique constraint.
        """
        now = self._clock.now()
        start, end = self.day_window(now)

        if await uow.prayer_reactions.exists_between(prayer_item_id, user_id, start, end):
            logger.info(
                "prayer_reaction_rejected",
                prayer_item_id=str(prayer_item_id),
                user_id=str(user_id),
                day_bucket=start.isoformat(),
            )
            raise AlreadyReactedError(str(prayer_item_id))

        await uow.prayer_reactions.add(
            PrayerReaction(
                prayer_item_id=prayer_item_id,
                user_id=user_id,
                reacted_at=start,
            )
        )
        logger.info(
            "prayer_reaction_recorded",
            prayer_item_id=str(prayer_item_id),
            user_id=str(user_id),
            day_bucket=start.isoformat(),
        )
        return await uow.prayer_reactions.count_for_item(prayer_item_id)

    async def reactors_of(self, uow: IUnitOfWork, prayer_item_id: UUID) -> list[Reactor]:
        """Full reaction history, newest first, not collapsed per user."""
        return await uow.prayer_reactions.list_reactors(prayer_item_id)


def _to_storage(moment: datetime) -> datetime:
    return moment.astimezone(timezone.utc).replace(tzinfo=None)
