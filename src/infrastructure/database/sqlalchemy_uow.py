"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_group_repo import SQLAlchemyGroupRepository
from infrastructure.database.repositories.sqlalchemy_prayer_item_repo import (
    SQLAlchemyPrayerItemRepository,
)
from infrastructure.database.repositories.sqlalchemy_prayer_reaction_repo import (
    SQLAlchemyPrayerReactionRepository,
)
from infrastructure.database.repositories.sqlalchemy_prayer_update_repo import (
    SQLAlchemyPrayerUpdateRepository,
)


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    All repositories handed out by one instance share its session, so a use
    case's reads and writes land in a single transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def groups(self) -> SQLAlchemyGroupRepository:
        """Get group membership repository."""
        return SQLAlchemyGroupRepository(self._require_session())

    @property
    def prayer_items(self) -> SQLAlchemyPrayerItemRepository:
        """Get prayer item repository."""
        return SQLAlchemyPrayerItemRepository(self._require_session())

    @property
    def prayer_reactions(self) -> SQLAlchemyPrayerReactionRepository:
        """Get prayer reaction repository."""
        return SQLAlchemyPrayerReactionRepository(self._require_session())

    @property
    def prayer_updates(self) -> SQLAlchemyPrayerUpdateRepository:
        """Get prayer update repository."""
        return SQLAlchemyPrayerUpdateRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, rolling back on error."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
