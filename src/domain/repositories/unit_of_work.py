"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.group_repository import IGroupRepository
from domain.repositories.prayer_item_repository import IPrayerItemRepository
from domain.repositories.prayer_reaction_repository import IPrayerReactionRepository
from domain.repositories.prayer_update_repository import IPrayerUpdateRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    groups: IGroupRepository
    prayer_items: IPrayerItemRepository
    prayer_reactions: IPrayerReactionRepository
    prayer_updates: IPrayerUpdateRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
