"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.drive.router import router as drive_router
from apps.drive_relay.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.drive_relay.presentation.http.controllers.google.router import router as google_router
from apps.drive_relay.presentation.http.controllers.oauth.router import router as oauth_router
from apps.drive_relay.presentation.http.controllers.proxy.router import router as proxy_router

router = APIRouter()

router.include_router(oauth_router, prefix="/oauth", tags=["oauth"])
router.include_router(google_router, prefix="/google", tags=["google"])
router.include_router(drive_router, tags=["drive"])
router.include_router(proxy_router, tags=["proxy"])
router.include_router(general_router, tags=["general"])
