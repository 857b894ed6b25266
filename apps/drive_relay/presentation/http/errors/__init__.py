"""HTTP error handling."""

from apps.drive_relay.presentation.http.errors.handlers import register_exception_handlers
from apps.drive_relay.presentation.http.errors.translators import translate_error

__all__ = ["register_exception_handlers", "translate_error"]
