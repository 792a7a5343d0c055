"""Prayer reaction service layer."""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from domain.entities.prayer import Reactor
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import authorization as authz
from domain.services.reaction_ledger import ReactionLedger

PRAYER_RECORDED = "Prayer recorded successfully"


@dataclass(frozen=True)
class PrayResult:
    message: str
    pray_count: int
    has_prayed_today: bool = True


class PrayerReactionService:
    """Service layer for praying for items and listing who prayed."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        ledger: ReactionLedger,
    ) -> None:
        self._uow_factory = uow_factory
        self._ledger = ledger

    async def pray(self, prayer_item_id: UUID, user_id: UUID) -> PrayResult:
        """Record today's prayer for an item. Any group member, author included."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            await authz.require_react(uow, user_id, item)

            pray_count = await self._ledger.record_reaction(uow, prayer_item_id, user_id)
            await uow.commit()
            return PrayResult(message=PRAYER_RECORDED, pray_count=pray_count)

    async def list_reactors(self, prayer_item_id: UUID, user_id: UUID) -> list[Reactor]:
        """Everyone who prayed for an item, newest first, one entry per day prayed."""
        async with self._uow_factory() as uow:
            item = await authz.load_item(uow, prayer_item_id)
            await authz.require_view(uow, user_id, item)

            return await self._ledger.reactors_of(uow, prayer_item_id)
