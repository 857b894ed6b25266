"""Drive Router."""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.drive.download import (
    router as download_router,
)
from apps.drive_relay.presentation.http.controllers.drive.info import router as info_router

router = APIRouter()

router.include_router(download_router)
router.include_router(info_router)
