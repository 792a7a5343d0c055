"""Prayer update repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.prayer import PrayerUpdate


class IPrayerUpdateRepository(Protocol):
    """Repository interface for PrayerUpdate entities."""

    async def get(self, id: UUID) -> PrayerUpdate | None:
        """Get an update by ID."""
        ...

    async def list_for_item(self, prayer_item_id: UUID) -> list[PrayerUpdate]:
        """Get an item's updates, oldest first."""
        ...

    async def create(self, update: PrayerUpdate) -> PrayerUpdate:
        """Create a new update."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an update."""
        ...
