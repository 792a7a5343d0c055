"""Prayer reaction API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_prayer_reaction_service
from api.v1.schemas.prayer import PrayResponse, ReactorListResponse, ReactorResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.prayer_reaction_service import PrayerReactionService

router = APIRouter(prefix="/prayer-items", tags=["prayer-reactions"])


@router.post(
    "/{prayer_item_id}/pray",
    response_model=PrayResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Pray for an item",
    responses={
        201: {"description": "Prayer recorded"},
        403: {"description": "Not a member of the group"},
        404: {"description": "Prayer item not found"},
        409: {"description": "Already prayed for this item today"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def pray_for_item(
    request: Request,
    prayer_item_id: UUID,
    user: CurrentUser,
    service: PrayerReactionService = Depends(get_prayer_reaction_service),
) -> PrayResponse:
    """Record that the caller prayed for this item today. Once per day."""
    result = await service.pray(prayer_item_id, user.id)
    return PrayResponse(
        message=result.message,
        pray_count=result.pray_count,
        has_prayed_today=result.has_prayed_today,
    )


@router.get(
    "/{prayer_item_id}/prayers",
    response_model=ReactorListResponse,
    summary="List who prayed for an item",
    responses={
        200: {"description": "Prayer history, newest first"},
        403: {"description": "Not a member of the group"},
        404: {"description": "Prayer item not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_prayers(
    request: Request,
    prayer_item_id: UUID,
    user: CurrentUser,
    service: PrayerReactionService = Depends(get_prayer_reaction_service),
) -> ReactorListResponse:
    """
    Get every prayer recorded for an item.

    A user who prayed on several days appears once per day.
    """
    reactors = await service.list_reactors(prayer_item_id, user.id)
    return ReactorListResponse(
        data=[
            ReactorResponse(
                id=reactor.user_id,
                name=reactor.display_name,
                prayed_at=reactor.reacted_at,
            )
            for reactor in reactors
        ],
        meta={"total": len(reactors)},
    )
