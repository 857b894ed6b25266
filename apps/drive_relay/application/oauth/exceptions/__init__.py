"""OAuth exceptions."""

from apps.drive_relay.application.oauth.exceptions.oauth import (
    InvalidStateError,
    OAuthDeniedError,
    OAuthNotConfiguredError,
    OAuthProviderUnavailableError,
    ResultNotFoundError,
    TokenEndpointError,
    TokenExchangeError,
    TokenRefreshError,
)

__all__ = [
    "InvalidStateError",
    "OAuthDeniedError",
    "OAuthNotConfiguredError",
    "OAuthProviderUnavailableError",
    "ResultNotFoundError",
    "TokenEndpointError",
    "TokenExchangeError",
    "TokenRefreshError",
]
