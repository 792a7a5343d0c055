"""Prayer domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4


class PrayerStatus(str, Enum):
    """Answer status of a prayer item. Any value may replace any other."""

    PRAYING = "praying"
    PARTIAL_ANSWER = "partial_answer"
    ANSWERED = "answered"


@dataclass
class PrayerItem:
    """Domain entity for a prayer request posted into a group.

    ``group_id``, ``author_id`` and ``is_anonymous`` never change after
    creation. The trailing fields are read-side relations filled in by the
    repository and are not persisted from here.
    """

    group_id: UUID
    author_id: UUID
    title: str
    content: str
    id: UUID = field(default_factory=uuid4)
    category: str | None = None
    status: PrayerStatus = PrayerStatus.PRAYING
    is_anonymous: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    author_name: str = ""
    group_name: str | None = None
    reaction_count: int = 0
    update_count: int = 0

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass
class PrayerReaction:
    """One "I prayed for this" ledger entry.

    ``reacted_at`` holds the start of the calendar day the reaction belongs to
    (stored as naive UTC), never the exact moment of the click.
    """

    prayer_item_id: UUID
    user_id: UUID
    reacted_at: datetime
    id: UUID = field(default_factory=uuid4)


@dataclass
class Reactor:
    """A historical reaction joined with the reacting user's display name."""

    user_id: UUID
    display_name: str
    reacted_at: datetime


@dataclass
class PrayerUpdate:
    """A progress note the author attaches to a prayer item."""

    prayer_item_id: UUID
    content: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
