"""Prayer update API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_prayer_update_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.prayer import (
    PrayerUpdateCreate,
    PrayerUpdateDetailResponse,
    PrayerUpdateListResponse,
    PrayerUpdateResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.prayer_update_service import PrayerUpdateService

# Nested under an item: /prayer-items/{id}/updates
prayer_updates_router = APIRouter(prefix="/prayer-items", tags=["prayer-updates"])

# Addressed by its own id: /prayer-updates/{update_id}
updates_router = APIRouter(prefix="/prayer-updates", tags=["prayer-updates"])


@prayer_updates_router.post(
    "/{prayer_item_id}/updates",
    response_model=PrayerUpdateDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a progress note",
    responses={
        201: {"description": "Update created"},
        403: {"description": "Not the author"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_prayer_update(
    request: Request,
    prayer_item_id: UUID,
    body: PrayerUpdateCreate,
    user: CurrentUser,
    service: PrayerUpdateService = Depends(get_prayer_update_service),
) -> PrayerUpdateDetailResponse:
    update = await service.create(prayer_item_id, user.id, body.content)
    return PrayerUpdateDetailResponse(data=PrayerUpdateResponse.model_validate(update))


@prayer_updates_router.get(
    "/{prayer_item_id}/updates",
    response_model=PrayerUpdateListResponse,
    summary="List progress notes",
    responses={
        200: {"description": "Updates, oldest first"},
        403: {"description": "Not a member of the group"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_prayer_updates(
    request: Request,
    prayer_item_id: UUID,
    user: CurrentUser,
    service: PrayerUpdateService = Depends(get_prayer_update_service),
) -> PrayerUpdateListResponse:
    updates = await service.list_for_item(prayer_item_id, user.id)
    return PrayerUpdateListResponse(
        data=[PrayerUpdateResponse.model_validate(u) for u in updates],
        meta={"total": len(updates)},
    )


@updates_router.delete(
    "/{update_id}",
    response_model=MessageResponse,
    summary="Delete a progress note",
    responses={
        200: {"description": "Update deleted"},
        403: {"description": "Not the prayer item's author"},
        404: {"description": "Update or prayer item not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_prayer_update(
    request: Request,
    update_id: UUID,
    user: CurrentUser,
    service: PrayerUpdateService = Depends(get_prayer_update_service),
) -> MessageResponse:
    await service.delete(update_id, user.id)
    return MessageResponse(message="Prayer update deleted successfully")
