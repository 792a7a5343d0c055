"""Prayer reaction (ledger) repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.prayer import PrayerReaction, Reactor


class IPrayerReactionRepository(Protocol):
    """Repository interface for the append-only reaction ledger."""

    async def exists_between(
        self,
        prayer_item_id: UUID,
        user_id: UUID,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check for a reaction with ``start <= reacted_at < end``."""
        ...

    async def add(self, reaction: PrayerReaction) -> PrayerReaction:
        """Insert a ledger row.

        Raises:
            AlreadyReactedError: if the store's daily uniqueness constraint
                rejects the row.
        """
        ...

    async def count_for_item(self, prayer_item_id: UUID) -> int:
        """Count every reaction on an item across all days."""
        ...

    async def list_reactors(self, prayer_item_id: UUID) -> list[Reactor]:
        """All reactions on an item, most recent first, one entry per row."""
        ...
