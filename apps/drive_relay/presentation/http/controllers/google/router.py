"""Google Router."""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.google.refresh import router as refresh_router

router = APIRouter()

router.include_router(refresh_router)
