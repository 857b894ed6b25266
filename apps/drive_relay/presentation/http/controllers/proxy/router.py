"""Proxy Router."""

from fastapi import APIRouter

from apps.drive_relay.presentation.http.controllers.proxy.relay import router as relay_router

router = APIRouter()

router.include_router(relay_router)
