"""Domain Entities."""

from apps.drive_relay.domain.entities.auth_session import (
    GOOGLE_PROVIDER,
    AuthSession,
    OAuthResult,
)

__all__ = ["AuthSession", "OAuthResult", "GOOGLE_PROVIDER"]
