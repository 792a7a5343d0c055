"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.prayer_items import router as prayer_items_router
from api.v1.routes.prayer_reactions import router as prayer_reactions_router
from api.v1.routes.prayer_updates import prayer_updates_router, updates_router

router = APIRouter()
router.include_router(prayer_items_router)
router.include_router(prayer_reactions_router)
router.include_router(prayer_updates_router)
router.include_router(updates_router)
