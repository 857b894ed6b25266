"""OAuth ports."""

from apps.drive_relay.application.oauth.ports.provider_gateway import OAuthProviderGateway
from apps.drive_relay.application.oauth.ports.session_store import SessionStore

__all__ = ["OAuthProviderGateway", "SessionStore"]
