"""Pydantic schemas for prayer item, reaction and update APIs."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.prayer import PrayerStatus


class PrayerItemCreate(BaseModel):
    """Schema for creating a prayer item."""

    group_id: UUID
    title: str = Field(..., min_length=2, max_length=200)
    content: str = Field(..., min_length=5, max_length=2000)
    category: str | None = Field(None, max_length=50)
    is_anonymous: bool = False


class PrayerStatusUpdate(BaseModel):
    """Schema for changing a prayer item's status."""

    status: PrayerStatus


class AuthorResponse(BaseModel):
    """Author as seen by the caller; ``id`` is null when masked."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID | None
    name: str


class GroupSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class PrayerCountsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reactions: int = 0
    updates: int = 0


class PrayerItemResponse(BaseModel):
    """Schema for PrayerItem response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "group_id": "456e4567-e89b-12d3-a456-426614174000",
                "title": "Job interview on Friday",
                "content": "Please pray for peace and clarity during the interview.",
                "category": "work",
                "status": "praying",
                "is_anonymous": True,
                "is_author": False,
                "author": {"id": None, "name": "익명"},
                "counts": {"reactions": 3, "updates": 1},
                "group": None,
                "has_prayed_today": None,
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    group_id: UUID
    title: str
    content: str
    category: str | None
    status: PrayerStatus
    is_anonymous: bool
    is_author: bool
    author: AuthorResponse
    counts: PrayerCountsResponse
    group: GroupSummaryResponse | None = None
    has_prayed_today: bool | None = None
    created_at: datetime
    updated_at: datetime


class PrayerItemListResponse(BaseModel):
    """Schema for a page of prayer items."""

    data: list[PrayerItemResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class PrayerItemDetailResponse(BaseModel):
    """Schema for single PrayerItem response."""

    data: PrayerItemResponse


class PrayResponse(BaseModel):
    """Result of praying for an item."""

    message: str
    pray_count: int
    has_prayed_today: bool = True


class ReactorResponse(BaseModel):
    """One historical prayer for an item."""

    id: UUID
    name: str
    prayed_at: datetime


class ReactorListResponse(BaseModel):
    data: list[ReactorResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class PrayerUpdateCreate(BaseModel):
    """Schema for adding a progress note."""

    content: str = Field(..., min_length=5)


class PrayerUpdateResponse(BaseModel):
    """Schema for PrayerUpdate response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    prayer_item_id: UUID
    content: str
    created_at: datetime


class PrayerUpdateDetailResponse(BaseModel):
    data: PrayerUpdateResponse


class PrayerUpdateListResponse(BaseModel):
    data: list[PrayerUpdateResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
