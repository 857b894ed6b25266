"""General Router.

Health check와 sweep 엔드포인트입니다.
"""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.general.health import router as health_router
from apps.drive_relay.presentation.http.controllers.general.sweep import router as sweep_router

router = APIRouter()

router.include_router(health_router)
router.include_router(sweep_router)
