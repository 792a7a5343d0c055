"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """User profile model (maintained by the identity provider)."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class GroupModel(Base):
    """Prayer group model."""

    __tablename__ = "groups"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    members: Mapped[list["GroupMemberModel"]] = relationship(
        "GroupMemberModel",
        back_populates="group",
        cascade="all, delete-orphan",
    )


class GroupMemberModel(Base):
    """Group membership model (composite PK on group_id + user_id)."""

    __tablename__ = "group_members"

    group_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint(
            "role IN ('admin', 'member')",
            name="ck_group_members_role",
        ),
        nullable=False,
        default="member",
    )
    joined_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    group: Mapped["GroupModel"] = relationship("GroupModel", back_populates="members")
    user: Mapped["ProfileModel"] = relationship("ProfileModel")


class PrayerItemModel(Base):
    """Prayer item model."""

    __tablename__ = "prayer_items"
    __table_args__ = (
        Index("ix_prayer_items_group_id_created_at", "group_id", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    group_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
    )
    author_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint(
            "status IN ('praying', 'partial_answer', 'answered')",
            name="ck_prayer_items_status",
        ),
        nullable=False,
        default="praying",
    )
    is_anonymous: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Relationships
    author: Mapped["ProfileModel"] = relationship("ProfileModel")
    group: Mapped["GroupModel"] = relationship("GroupModel")
    reactions: Mapped[list["PrayerReactionModel"]] = relationship(
        "PrayerReactionModel",
        back_populates="prayer_item",
        cascade="all, delete-orphan",
    )
    updates: Mapped[list["PrayerUpdateModel"]] = relationship(
        "PrayerUpdateModel",
        back_populates="prayer_item",
        cascade="all, delete-orphan",
    )


class PrayerReactionModel(Base):
    """Daily prayer reaction ledger row.

    ``reacted_at`` always stores the day bucket, which makes the unique
    constraint below the once-per-day rule itself.
    """

    __tablename__ = "prayer_reactions"
    __table_args__ = (
        UniqueConstraint(
            "prayer_item_id",
            "user_id",
            "reacted_at",
            name="uq_prayer_reactions_daily",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    prayer_item_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("prayer_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    reacted_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    # Relationships
    prayer_item: Mapped["PrayerItemModel"] = relationship(
        "PrayerItemModel",
        back_populates="reactions",
    )
    user: Mapped["ProfileModel"] = relationship("ProfileModel")


class PrayerUpdateModel(Base):
    """Progress note attached to a prayer item."""

    __tablename__ = "prayer_updates"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    prayer_item_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("prayer_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    prayer_item: Mapped["PrayerItemModel"] = relationship(
        "PrayerItemModel",
        back_populates="updates",
    )
