"""OAuth commands."""

from apps.drive_relay.application.oauth.commands.callback import OAuthCallbackInteractor
from apps.drive_relay.application.oauth.commands.poll import (
    OAuthFinalInteractor,
    OAuthPollInteractor,
)
from apps.drive_relay.application.oauth.commands.refresh import TokenRefreshInteractor
from apps.drive_relay.application.oauth.commands.start import OAuthStartInteractor

__all__ = [
    "OAuthCallbackInteractor",
    "OAuthFinalInteractor",
    "OAuthPollInteractor",
    "OAuthStartInteractor",
    "TokenRefreshInteractor",
]
