"""Group membership domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class GroupRole(str, Enum):
    """Role within a group. An admin holds every member permission too."""

    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class GroupMember:
    """Domain entity for a group membership."""

    group_id: UUID
    user_id: UUID
    role: GroupRole = GroupRole.MEMBER
    joined_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role is GroupRole.ADMIN
