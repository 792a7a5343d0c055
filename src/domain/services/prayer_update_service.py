"""Prayer update service layer."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import PrayerUpdateNotFoundError
from domain.entities.prayer import PrayerUpdate
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import authorization as authz


class PrayerUpdateService:
    """Progress notes on a prayer item.

    Only the item's author may add or remove notes, whatever their group
    role. Any member may read them.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(
        self, prayer_item_id: UUID, user_id: UUID, content: str
    ) -> PrayerUpdate:
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            authz.require_update_management(user_id, item, authz.UPDATE_CREATE_DENIED)

            created = await uow.prayer_updates.create(
                PrayerUpdate(prayer_item_id=prayer_item_id, content=content)
            )
            await uow.commit()
            return created

    async def list_for_item(self, prayer_item_id: UUID, user_id: UUID) -> list[PrayerUpdate]:
        """Get an item's notes, oldest first. Requires group membership."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            await authz.require_view(uow, user_id, item)

            return await uow.prayer_updates.list_for_item(prayer_item_id)

    async def delete(self, update_id: UUID, user_id: UUID) -> None:
        async with self._uow_factory() as uow:
            update = await uow.prayer_updates.get(update_id)
            if not update:
                raise PrayerUpdateNotFoundError(str(update_id))

            item = await authz.load_item(uow, update.prayer_item_id)
            authz.require_update_management(user_id, item, authz.UPDATE_DELETE_DENIED)

            await uow.prayer_updates.delete(update_id)
            await uow.commit()
