"""SQLAlchemy implementation of PrayerUpdate repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.prayer import PrayerUpdate
from infrastructure.database.models import PrayerUpdateModel


class SQLAlchemyPrayerUpdateRepository:
    """SQLAlchemy implementation of IPrayerUpdateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> PrayerUpdate | None:
        stmt = select(PrayerUpdateModel).where(PrayerUpdateModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_for_item(self, prayer_item_id: UUID) -> list[PrayerUpdate]:
        stmt = (
            select(PrayerUpdateModel)
            .where(PrayerUpdateModel.prayer_item_id == prayer_item_id)
            .order_by(PrayerUpdateModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, update: PrayerUpdate) -> PrayerUpdate:
        model = PrayerUpdateModel(
            id=update.id,
            prayer_item_id=update.prayer_item_id,
            content=update.content,
            created_at=update.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        stmt = select(PrayerUpdateModel).where(PrayerUpdateModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: PrayerUpdateModel) -> PrayerUpdate:
        """Convert ORM model to domain entity."""
        return PrayerUpdate(
            id=model.id,
            prayer_item_id=model.prayer_item_id,
            content=model.content,
            created_at=model.created_at,
        )
