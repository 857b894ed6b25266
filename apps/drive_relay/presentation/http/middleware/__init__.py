"""HTTP middleware."""

from apps.drive_relay.presentation.http.middleware.cors import (
    RelayCORSMiddleware,
    build_cors_headers,
    resolve_allow_origin,
)

__all__ = ["RelayCORSMiddleware", "build_cors_headers", "resolve_allow_origin"]
