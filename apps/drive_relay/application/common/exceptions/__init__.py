"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 패키지에서 직접 import하세요:
  - apps.drive_relay.application.oauth.exceptions.*
  - apps.drive_relay.application.drive.exceptions.*
"""

from apps.drive_relay.application.common.exceptions.base import ApplicationError
from apps.drive_relay.application.common.exceptions.limits import (
    PayloadTooLargeError,
    RateLimitExceededError,
    UpstreamError,
)
from apps.drive_relay.application.common.exceptions.request import MissingParameterError

__all__ = [
    "ApplicationError",
    "MissingParameterError",
    "PayloadTooLargeError",
    "RateLimitExceededError",
    "UpstreamError",
]
