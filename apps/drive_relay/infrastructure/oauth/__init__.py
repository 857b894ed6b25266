"""OAuth provider adapters."""

from apps.drive_relay.infrastructure.oauth.google import GoogleOAuthProvider

__all__ = ["GoogleOAuthProvider"]
