"""SQLAlchemy implementation of the prayer reaction ledger repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import AlreadyReactedError
from domain.entities.prayer import PrayerReaction, Reactor
from infrastructure.database.models import PrayerReactionModel, ProfileModel


def _is_unique_violation(exc: IntegrityError) -> bool:
    # PostgreSQL: 'duplicate key value violates unique constraint "..."'
    # SQLite: 'UNIQUE constraint failed: ...'
    return "unique" in str(exc.orig).lower()


class SQLAlchemyPrayerReactionRepository:
    """SQLAlchemy implementation of IPrayerReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_between(
        self,
        prayer_item_id: UUID,
        user_id: UUID,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check whether the user has a reaction inside ``[start, end)``."""
        stmt = (
            select(PrayerReactionModel.id)
            .where(
                PrayerReactionModel.prayer_item_id == prayer_item_id,
                PrayerReactionModel.user_id == user_id,
                PrayerReactionModel.reacted_at >= start,
                PrayerReactionModel.reacted_at < end,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, reaction: PrayerReaction) -> PrayerReaction:
        """Insert a ledger row, mapping a daily-uniqueness clash to a conflict."""
        model = PrayerReactionModel(
            id=reaction.id,
            prayer_item_id=reaction.prayer_item_id,
            user_id=reaction.user_id,
            reacted_at=reaction.reacted_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise AlreadyReactedError(str(reaction.prayer_item_id)) from exc
            raise
        return PrayerReaction(
            id=model.id,
            prayer_item_id=model.prayer_item_id,
            user_id=model.user_id,
            reacted_at=model.reacted_at,
        )

    async def count_for_item(self, prayer_item_id: UUID) -> int:
        """Count all reactions for an item across every day."""
        stmt = (
            select(func.count())
            .select_from(PrayerReactionModel)
            .where(PrayerReactionModel.prayer_item_id == prayer_item_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_reactors(self, prayer_item_id: UUID) -> list[Reactor]:
        """Get every reaction with the reacting user's name, newest first."""
        stmt = (
            select(
                PrayerReactionModel.user_id,
                ProfileModel.display_name,
                PrayerReactionModel.reacted_at,
            )
            .join(ProfileModel, PrayerReactionModel.user_id == ProfileModel.id)
            .where(PrayerReactionModel.prayer_item_id == prayer_item_id)
            .order_by(PrayerReactionModel.reacted_at.desc())
        )
        result = await self._session.execute(stmt)
        return [
            Reactor(
                user_id=row.user_id,
                display_name=row.display_name,
                reacted_at=row.reacted_at,
            )
            for row in result
        ]
