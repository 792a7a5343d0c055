"""create_prayer_tables

Revision ID: 4c2d7e91a0b3
Revises:
Create Date: 2026-03-04 09:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c2d7e91a0b3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles, groups, memberships and the prayer tables."""
    op.create_table('profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table('groups',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('group_members',
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='member'),
        sa.Column('joined_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("role IN ('admin', 'member')", name='ck_group_members_role'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('group_id', 'user_id'),
    )
    op.create_index('ix_group_members_user_id', 'group_members', ['user_id'], unique=False)

    op.create_table('prayer_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='praying'),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "status IN ('praying', 'partial_answer', 'answered')",
            name='ck_prayer_items_status',
        ),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_prayer_items_author_id', 'prayer_items', ['author_id'], unique=False)
    op.create_index(
        'ix_prayer_items_group_id_created_at',
        'prayer_items',
        ['group_id', 'created_at'],
        unique=False,
    )

    op.create_table('prayer_reactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('prayer_item_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('reacted_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['prayer_item_id'], ['prayer_items.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'prayer_item_id', 'user_id', 'reacted_at',
            name='uq_prayer_reactions_daily',
        ),
    )
    op.create_index(
        'ix_prayer_reactions_prayer_item_id',
        'prayer_reactions',
        ['prayer_item_id'],
        unique=False,
    )

    op.create_table('prayer_updates',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('prayer_item_id', sa.Uuid(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['prayer_item_id'], ['prayer_items.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_prayer_updates_prayer_item_id',
        'prayer_updates',
        ['prayer_item_id'],
        unique=False,
    )


def downgrade() -> None:
    """Drop the prayer tables, memberships, groups and profiles."""
    op.drop_index('ix_prayer_updates_prayer_item_id', table_name='prayer_updates')
    op.drop_table('prayer_updates')
    op.drop_index('ix_prayer_reactions_prayer_item_id', table_name='prayer_reactions')
    op.drop_table('prayer_reactions')
    op.drop_index('ix_prayer_items_group_id_created_at', table_name='prayer_items')
    op.drop_index('ix_prayer_items_author_id', table_name='prayer_items')
    op.drop_table('prayer_items')
    op.drop_index('ix_group_members_user_id', table_name='group_members')
    op.drop_table('group_members')
    op.drop_table('groups')
    op.drop_table('profiles')
