"""Group membership repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.group import GroupMember


class IGroupRepository(Protocol):
    """Read-only access to group memberships.

    Memberships are owned by the identity side of the system; this service
    never creates or changes them.
    """

    async def get_member(
        self, group_id: UUID, user_id: UUID
    ) -> GroupMember | None:
        """Get a specific group member, or None when the user is not one."""
        ...
