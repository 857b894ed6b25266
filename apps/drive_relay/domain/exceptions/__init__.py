"""Domain Exceptions."""

from apps.drive_relay.domain.exceptions.base import DomainError
from apps.drive_relay.domain.exceptions.validation import (
    HostNotAllowedError,
    InvalidCompositeStateError,
    InvalidFileIdError,
    InvalidProxyTargetError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidFileIdError",
    "InvalidCompositeStateError",
    "InvalidProxyTargetError",
    "HostNotAllowedError",
]
