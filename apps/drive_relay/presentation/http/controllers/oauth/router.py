"""OAuth Router."""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.oauth.callback import router as callback_router
from apps.drive_relay.presentation.http.controllers.oauth.poll import router as poll_router
from apps.drive_relay.presentation.http.controllers.oauth.start import router as start_router

router = APIRouter()

router.include_router(start_router)
router.include_router(callback_router)
router.include_router(poll_router)
