"""HTTP schemas."""

from apps.drive_relay.presentation.http.schemas.drive import FileInfoResponse
from apps.drive_relay.presentation.http.schemas.general import HealthResponse, SweepResponse
from apps.drive_relay.presentation.http.schemas.oauth import (
    FinalResponse,
    OAuthResultSchema,
    PollResponse,
    RefreshRequest,
    RefreshResponse,
    StartResponse,
)

__all__ = [
    "FileInfoResponse",
    "FinalResponse",
    "HealthResponse",
    "OAuthResultSchema",
    "PollResponse",
    "RefreshRequest",
    "RefreshResponse",
    "StartResponse",
    "SweepResponse",
]
