"""Prayer item repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.prayer import PrayerItem, PrayerStatus


class IPrayerItemRepository(Protocol):
    """Repository interface for PrayerItem entities."""

    async def get(self, id: UUID) -> PrayerItem | None:
        """Get a prayer item by ID with author name and counts."""
        ...

    async def get_with_group(self, id: UUID) -> PrayerItem | None:
        """Get a prayer item by ID, additionally resolving the group name."""
        ...

    async def list_for_group(
        self,
        group_id: UUID,
        status: PrayerStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[PrayerItem], int]:
        """Get one page of a group's items, newest first, plus the total count."""
        ...

    async def create(self, item: PrayerItem) -> PrayerItem:
        """Create a new prayer item."""
        ...

    async def update_status(self, id: UUID, status: PrayerStatus) -> PrayerItem | None:
        """Overwrite the status field only. Returns None if the row is gone."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a prayer item with its reactions and updates."""
        ...
