"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.clock import SystemClock
from domain.services.prayer_item_service import PrayerItemService
from domain.services.prayer_reaction_service import PrayerReactionService
from domain.services.prayer_update_service import PrayerUpdateService
from domain.services.reaction_ledger import ReactionLedger
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_reaction_ledger() -> ReactionLedger:
    """Get the reaction ledger bound to the wall clock."""
    return ReactionLedger(SystemClock())


@lru_cache
def get_prayer_item_service() -> PrayerItemService:
    """Get PrayerItem service instance."""
    return PrayerItemService(get_uow_factory(), ledger=get_reaction_ledger())


@lru_cache
def get_prayer_reaction_service() -> PrayerReactionService:
    """Get PrayerReaction service instance."""
    return PrayerReactionService(get_uow_factory(), ledger=get_reaction_ledger())


@lru_cache
def get_prayer_update_service() -> PrayerUpdateService:
    """Get PrayerUpdate service instance."""
    return PrayerUpdateService(get_uow_factory())
