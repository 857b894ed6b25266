"""OAuth services."""

from apps.drive_relay.application.oauth.services.pkce import (
    generate_code_challenge,
    generate_code_verifier,
)

__all__ = ["generate_code_challenge", "generate_code_verifier"]
