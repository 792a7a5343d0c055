"""Viewer-relative projection of prayer items.

Anonymity is applied here, per viewer and per request, and never written to
storage: the same stored item yields the real author for its author and a
masked author for everyone else.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from domain.entities.prayer import PrayerItem, PrayerStatus

ANONYMOUS_AUTHOR_NAME = "익명"


@dataclass(frozen=True)
class AuthorView:
    id: UUID | None
    name: str


@dataclass(frozen=True)
class GroupSummary:
    id: UUID
    name: str


@dataclass(frozen=True)
class PrayerCounts:
    reactions: int = 0
    updates: int = 0


@dataclass(frozen=True)
class PrayerItemView:
    """What a given viewer is allowed to see of a prayer item.

    ``is_author`` is a hint for clients deciding which controls to render;
    permission checks never read it.
    """

    id: UUID
    group_id: UUID
    title: str
    content: str
    category: str | None
    status: PrayerStatus
    is_anonymous: bool
    created_at: datetime
    updated_at: datetime
    is_author: bool
    author: AuthorView
    counts: PrayerCounts = field(default_factory=PrayerCounts)
    group: GroupSummary | None = None
    has_prayed_today: bool | None = None


@dataclass(frozen=True)
class PrayerItemPage:
    items: list[PrayerItemView]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


def project_author(item: PrayerItem, viewer_id: UUID) -> AuthorView:
    if item.is_anonymous and viewer_id != item.author_id:
        return AuthorView(id=None, name=ANONYMOUS_AUTHOR_NAME)
    return AuthorView(id=item.author_id, name=item.author_name)


def project(
    item: PrayerItem,
    viewer_id: UUID,
    has_prayed_today: bool | None = None,
) -> PrayerItemView:
    """Build the view of ``item`` for ``viewer_id``."""
    group = None
    if item.group_name is not None:
        group = GroupSummary(id=item.group_id, name=item.group_name)

    return PrayerItemView(
        id=item.id,
        group_id=item.group_id,
        title=item.title,
        content=item.content,
        category=item.category,
        status=item.status,
        is_anonymous=item.is_anonymous,
        created_at=item.created_at,
        updated_at=item.updated_at,
        is_author=viewer_id == item.author_id,
        author=project_author(item, viewer_id),
        counts=PrayerCounts(reactions=item.reaction_count, updates=item.update_count),
        group=group,
        has_prayed_today=has_prayed_today,
    )


def project_many(items: Sequence[PrayerItem], viewer_id: UUID) -> list[PrayerItemView]:
    """Project each item for the same viewer, keeping input order."""
    return [project(item, viewer_id) for item in items]
