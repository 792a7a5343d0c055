"""Prayer item service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

from core.config import settings
from core.exceptions import PrayerItemNotFoundError
from domain.entities.prayer import PrayerItem, PrayerStatus
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import authorization as authz
from domain.services.reaction_ledger import ReactionLedger
from domain.services.visibility import (
    PrayerItemPage,
    PrayerItemView,
    project,
    project_many,
)


class PrayerItemService:
    """Create, read, list, re-status and delete prayer items.

    Every method authorizes before it touches the store and returns a view
    already projected for the calling user.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        ledger: ReactionLedger,
    ) -> None:
        self._uow_factory = uow_factory
        self._ledger = ledger

    async def create(
        self,
        user_id: UUID,
        group_id: UUID,
        title: str,
        content: str,
        category: str | None = None,
        is_anonymous: bool = False,
    ) -> PrayerItemView:
        """Post a new item into a group. Requires group membership."""
        async with self._uow_factory() as uow:
            await authz.require_group_member(uow, user_id, group_id)

            item = PrayerItem(
                group_id=group_id,
                author_id=user_id,
                title=title,
                content=content,
                category=category,
                is_anonymous=is_anonymous,
            )
            created = await uow.prayer_items.create(item)
            await uow.commit()
            return project(created, user_id)

    async def get_by_id(self, prayer_item_id: UUID, user_id: UUID) -> PrayerItemView:
        """Get one item with its group summary and today's prayer flag."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id, with_group=True)
            await authz.require_view(uow, user_id, item)

            has_prayed_today = await self._ledger.has_reacted_today(
                uow, prayer_item_id, user_id
            )
            return project(item, user_id, has_prayed_today=has_prayed_today)

    async def list_by_group(
        self,
        group_id: UUID,
        user_id: UUID,
        status: PrayerStatus | None = None,
        page: int = 1,
        limit: int = settings.default_page_size,
    ) -> PrayerItemPage:
        """Get one page of a group's items, newest first. Requires membership."""
        if page < 1:
            raise ValueError("page must be >= 1")
        if limit < 1:
            raise ValueError("limit must be >= 1")

        async with self._uow_factory() as uow:
            await authz.require_group_member(uow, user_id, group_id)

            items, total = await uow.prayer_items.list_for_group(
                group_id,
                status=status,
                limit=limit,
                offset=(page - 1) * limit,
            )
            return PrayerItemPage(
                items=project_many(items, user_id),
                total=total,
                page=page,
                limit=limit,
            )

    async def update_status(
        self, prayer_item_id: UUID, user_id: UUID, status: PrayerStatus
    ) -> PrayerItemView:
        """Replace the item's status. Author or group admin only."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            await authz.require_status_change(uow, user_id, item)

            updated = await uow.prayer_items.update_status(prayer_item_id, status)
            if not updated:
                # Deleted between the read and the write.
                raise PrayerItemNotFoundError(str(prayer_item_id))
            await uow.commit()
            return project(updated, user_id)

    async def delete(self, prayer_item_id: UUID, user_id: UUID) -> None:
        """Delete an item with its reactions and updates. Author only."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            authz.require_item_delete(user_id, item)

            if not await uow.prayer_items.delete(prayer_item_id):
                raise PrayerItemNotFoundError(str(prayer_item_id))
            await uow.commit()
