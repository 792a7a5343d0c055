"""Authorization rules for prayer items and their attachments.

The ``can_*`` predicates are pure: they receive the actor, the resource and
the actor's membership in the resource's group (already looked up, or None)
and return a boolean. The rules are fixed:

* viewing, posting into a group and praying need any membership
* changing status needs authorship or the group admin role
* deleting an item and managing its updates need authorship; admins get
  nothing extra there

The async helpers below are what services call. They always resolve the item
first (404) and only then read the membership fresh from the store, so a role
change takes effect on the very next request.
"""

from uuid import UUID

from core.exceptions import (
    AuthorizationError,
    NotAGroupMemberError,
    PrayerItemNotFoundError,
)
from domain.entities.group import GroupMember
from domain.entities.prayer import PrayerItem
from domain.repositories.unit_of_work import IUnitOfWork

STATUS_CHANGE_DENIED = "Only the author or group admin can update the status"
ITEM_DELETE_DENIED = "Only the author can delete this prayer item"
UPDATE_CREATE_DENIED = "Only the author can create updates for this prayer item"
UPDATE_DELETE_DENIED = "Only the prayer item author can delete this update"


def _belongs_to(membership: GroupMember | None, group_id: UUID) -> bool:
    return membership is not None and membership.group_id == group_id


def can_create(actor_id: UUID, group_id: UUID, membership: GroupMember | None) -> bool:
    return _belongs_to(membership, group_id)


def can_view(actor_id: UUID, item: PrayerItem, membership: GroupMember | None) -> bool:
    return _belongs_to(membership, item.group_id)


def can_react(actor_id: UUID, item: PrayerItem, membership: GroupMember | None) -> bool:
    """Any member may pray, the author included."""
    return can_view(actor_id, item, membership)


def can_change_status(
    actor_id: UUID, item: PrayerItem, membership: GroupMember | None
) -> bool:
    if actor_id == item.author_id:
        return True
    return (
        membership is not None
        and membership.group_id == item.group_id
        and membership.is_admin
    )


def can_delete_item(actor_id: UUID, item: PrayerItem) -> bool:
    return actor_id == item.author_id


def can_manage_updates(actor_id: UUID, item: PrayerItem) -> bool:
    return actor_id == item.author_id


# --- Store-backed helpers ---


async def load_item(
    uow: IUnitOfWork, prayer_item_id: UUID, with_group: bool = False
) -> PrayerItem:
    """Fetch an item or raise PrayerItemNotFoundError."""
    if with_group:
        item = await uow.prayer_items.get_with_group(prayer_item_id)
    else:
        item = await uow.prayer_items.get(prayer_item_id)
    if not item:
        raise PrayerItemNotFoundError(str(prayer_item_id))
    return item


async def membership_for(
    uow: IUnitOfWork, user_id: UUID, group_id: UUID
) -> GroupMember | None:
    return await uow.groups.get_member(group_id, user_id)


async def require_group_member(uow: IUnitOfWork, user_id: UUID, group_id: UUID) -> None:
    """Raise NotAGroupMemberError unless the user may post into the group."""
    membership = await membership_for(uow, user_id, group_id)
    if not can_create(user_id, group_id, membership):
        raise NotAGroupMemberError()


async def require_view(uow: IUnitOfWork, user_id: UUID, item: PrayerItem) -> None:
    membership = await membership_for(uow, user_id, item.group_id)
    if not can_view(user_id, item, membership):
        raise NotAGroupMemberError()


async def require_react(uow: IUnitOfWork, user_id: UUID, item: PrayerItem) -> None:
    membership = await membership_for(uow, user_id, item.group_id)
    if not can_react(user_id, item, membership):
        raise NotAGroupMemberError()


async def require_status_change(
    uow: IUnitOfWork, user_id: UUID, item: PrayerItem
) -> None:
    # Authors pass without a membership lookup.
    if user_id == item.author_id:
        return
    membership = await membership_for(uow, user_id, item.group_id)
    if not can_change_status(user_id, item, membership):
        raise AuthorizationError(STATUS_CHANGE_DENIED)


def require_item_delete(user_id: UUID, item: PrayerItem) -> None:
    if not can_delete_item(user_id, item):
        raise AuthorizationError(ITEM_DELETE_DENIED)


def require_update_management(user_id: UUID, item: PrayerItem, message: str) -> None:
    if not can_manage_updates(user_id, item):
        raise AuthorizationError(message)
