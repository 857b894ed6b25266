"""OAuth DTOs."""

from apps.drive_relay.application.oauth.dto.oauth import (
    OAuthCallbackRequest,
    OAuthPollResponse,
    OAuthStartRequest,
    OAuthStartResponse,
    TokenRefreshResponse,
)

__all__ = [
    "OAuthCallbackRequest",
    "OAuthPollResponse",
    "OAuthStartRequest",
    "OAuthStartResponse",
    "TokenRefreshResponse",
]
