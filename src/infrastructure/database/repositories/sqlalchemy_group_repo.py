"""SQLAlchemy implementation of the group membership repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.group import GroupMember, GroupRole
from infrastructure.database.models import GroupMemberModel


class SQLAlchemyGroupRepository:
    """SQLAlchemy implementation of IGroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_member(
        self, group_id: UUID, user_id: UUID
    ) -> GroupMember | None:
        """Get a specific group member."""
        stmt = select(GroupMemberModel).where(
            GroupMemberModel.group_id == group_id,
            GroupMemberModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._member_to_entity(model) if model else None

    def _member_to_entity(self, model: GroupMemberModel) -> GroupMember:
        """Convert member ORM model to domain entity."""
        return GroupMember(
            group_id=model.group_id,
            user_id=model.user_id,
            role=GroupRole(model.role),
            joined_at=model.joined_at,
        )
