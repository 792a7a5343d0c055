"""SQLAlchemy implementation of PrayerItem repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.prayer import PrayerItem, PrayerStatus
from infrastructure.database.models import (
    GroupModel,
    PrayerItemModel,
    PrayerReactionModel,
    PrayerUpdateModel,
    ProfileModel,
)


def _reaction_count() -> Any:
    return (
        select(func.count(PrayerReactionModel.id))
        .where(PrayerReactionModel.prayer_item_id == PrayerItemModel.id)
        .correlate(PrayerItemModel)
        .scalar_subquery()
        .label("reaction_count")
    )


def _update_count() -> Any:
    return (
        select(func.count(PrayerUpdateModel.id))
        .where(PrayerUpdateModel.prayer_item_id == PrayerItemModel.id)
        .correlate(PrayerItemModel)
        .scalar_subquery()
        .label("update_count")
    )


class SQLAlchemyPrayerItemRepository:
    """SQLAlchemy implementation of IPrayerItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_with_relations(self, with_group: bool = False) -> Select[Any]:
        """Item row plus author name and counts, optionally the group name."""
        columns: list[Any] = [
            PrayerItemModel,
            ProfileModel.display_name,
            _reaction_count(),
            _update_count(),
        ]
        if with_group:
            columns.append(GroupModel.name)

        stmt = select(*columns).join(
            ProfileModel, PrayerItemModel.author_id == ProfileModel.id
        )
        if with_group:
            stmt = stmt.join(GroupModel, PrayerItemModel.group_id == GroupModel.id)
        return stmt

    async def get(self, id: UUID) -> PrayerItem | None:
        """Get a prayer item by ID."""
        stmt = self._select_with_relations().where(PrayerItemModel.id == id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._row_to_entity(row) if row else None

    async def get_with_group(self, id: UUID) -> PrayerItem | None:
        """Get a prayer item by ID including its group name."""
        stmt = self._select_with_relations(with_group=True).where(PrayerItemModel.id == id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._row_to_entity(row, with_group=True) if row else None

    async def list_for_group(
        self,
        group_id: UUID,
        status: PrayerStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[PrayerItem], int]:
        """Get a page of a group's items (newest first) and the filtered total."""
        filters = [PrayerItemModel.group_id == group_id]
        if status is not None:
            filters.append(PrayerItemModel.status == status.value)

        stmt = (
            self._select_with_relations()
            .where(*filters)
            .order_by(PrayerItemModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        items = [self._row_to_entity(row) for row in result]

        count_stmt = select(func.count()).select_from(PrayerItemModel).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()
        return items, total

    async def create(self, item: PrayerItem) -> PrayerItem:
        """Create a new prayer item."""
        model = self._to_model(item)
        self._session.add(model)
        await self._session.flush()
        created = await self.get(model.id)
        if created is None:
            raise ValueError(f"Prayer item {model.id} not found after insert")
        return created

    async def update_status(self, id: UUID, status: PrayerStatus) -> PrayerItem | None:
        """Overwrite the status column of an existing item."""
        stmt = select(PrayerItemModel).where(PrayerItemModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return None

        model.status = status.value
        model.updated_at = datetime.utcnow()
        await self._session.flush()
        return await self.get(id)

    async def delete(self, id: UUID) -> bool:
        """Delete a prayer item (cascade deletes reactions and updates)."""
        stmt = select(PrayerItemModel).where(PrayerItemModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _row_to_entity(self, row: Any, with_group: bool = False) -> PrayerItem:
        """Convert a joined result row to a domain entity."""
        model: PrayerItemModel = row[0]
        return PrayerItem(
            id=model.id,
            group_id=model.group_id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            category=model.category,
            status=PrayerStatus(model.status),
            is_anonymous=model.is_anonymous,
            created_at=model.created_at,
            updated_at=model.updated_at,
            author_name=row[1],
            reaction_count=row[2] or 0,
            update_count=row[3] or 0,
            group_name=row[4] if with_group else None,
        )

    def _to_model(self, entity: PrayerItem) -> PrayerItemModel:
        """Convert domain entity to ORM model."""
        return PrayerItemModel(
            id=entity.id,
            group_id=entity.group_id,
            author_id=entity.author_id,
            title=entity.title,
            content=entity.content,
            category=entity.category,
            status=entity.status.value,
            is_anonymous=entity.is_anonymous,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
