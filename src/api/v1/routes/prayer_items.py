"""Prayer item API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_prayer_item_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.prayer import (
    PrayerItemCreate,
    PrayerItemDetailResponse,
    PrayerItemListResponse,
    PrayerItemResponse,
    PrayerStatusUpdate,
)
from core.config import settings
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.prayer import PrayerStatus
from domain.services.prayer_item_service import PrayerItemService

router = APIRouter(prefix="/prayer-items", tags=["prayer-items"])


@router.post(
    "",
    response_model=PrayerItemDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a prayer item",
    responses={
        201: {"description": "Prayer item created"},
        403: {"description": "Not a member of the group"},
        422: {"description": "Validation error"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_prayer_item(
    request: Request,
    body: PrayerItemCreate,
    user: CurrentUser,
    service: PrayerItemService = Depends(get_prayer_item_service),
) -> PrayerItemDetailResponse:
    """Post a prayer request into a group the caller belongs to."""
    view = await service.create(
        user_id=user.id,
        group_id=body.group_id,
        title=body.title,
        content=body.content,
        category=body.category,
        is_anonymous=body.is_anonymous,
    )
    return PrayerItemDetailResponse(data=PrayerItemResponse.model_validate(view))


@router.get(
    "",
    response_model=PrayerItemListResponse,
    summary="List a group's prayer items",
    responses={
        200: {"description": "One page of prayer items, newest first"},
        403: {"description": "Not a member of the group"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_prayer_items(
    request: Request,
    user: CurrentUser,
    group_id: UUID = Query(..., description="Group to list items from"),
    status_filter: PrayerStatus | None = Query(
        None, alias="status", description="Only items with this status"
    ),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: PrayerItemService = Depends(get_prayer_item_service),
) -> PrayerItemListResponse:
    """
    Get a page of prayer items in a group.

    Anonymous items show a masked author to everyone except their author.
    """
    result = await service.list_by_group(
        group_id,
        user.id,
        status=status_filter,
        page=page,
        limit=limit,
    )
    return PrayerItemListResponse(
        data=[PrayerItemResponse.model_validate(item) for item in result.items],
        meta={
            "total": result.total,
            "page": result.page,
            "limit": result.limit,
            "total_pages": result.total_pages,
        },
    )


@router.get(
    "/{prayer_item_id}",
    response_model=PrayerItemDetailResponse,
    summary="Get a prayer item",
    responses={
        200: {"description": "Prayer item with group and today's prayer flag"},
        403: {"description": "Not a member of the group"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_prayer_item(
    request: Request,
    prayer_item_id: UUID,
    user: CurrentUser,
    service: PrayerItemService = Depends(get_prayer_item_service),
) -> PrayerItemDetailResponse:
    """Get a prayer item by ID."""
    view = await service.get_by_id(prayer_item_id, user.id)
    return PrayerItemDetailResponse(data=PrayerItemResponse.model_validate(view))


@router.patch(
    "/{prayer_item_id}/status",
    response_model=PrayerItemDetailResponse,
    summary="Change a prayer item's status",
    responses={
        200: {"description": "Status updated"},
        403: {"description": "Neither the author nor a group admin"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_prayer_item_status(
    request: Request,
    prayer_item_id: UUID,
    body: PrayerStatusUpdate,
    user: CurrentUser,
    service: PrayerItemService = Depends(get_prayer_item_service),
) -> PrayerItemDetailResponse:
    """Set the status of a prayer item. Allowed for its author or a group admin."""
    view = await service.update_status(prayer_item_id, user.id, body.status)
    return PrayerItemDetailResponse(data=PrayerItemResponse.model_validate(view))


@router.delete(
    "/{prayer_item_id}",
    response_model=MessageResponse,
    summary="Delete a prayer item",
    responses={
        200: {"description": "Prayer item deleted"},
        403: {"description": "Not the author"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_prayer_item(
    request: Request,
    prayer_item_id: UUID,
    user: CurrentUser,
    service: PrayerItemService = Depends(get_prayer_item_service),
) -> MessageResponse:
    """
    Delete a prayer item with all of its prayers and updates.

    Only the author may delete; group admins cannot.
    """
    await service.delete(prayer_item_id, user.id)
    return MessageResponse(message="Prayer item deleted successfully")
