"""Error Translators.

도메인/애플리케이션 예외를 (HTTP 상태 코드, 에러 코드)로 변환합니다.
"""

from apps.drive_relay.application.common.exceptions import (
    MissingParameterError,
    PayloadTooLargeError,
    RateLimitExceededError,
    UpstreamError,
)
from apps.drive_relay.application.drive.exceptions import (
    DriveAccessDeniedError,
    DriveApiError,
    DriveFileNotFoundError,
    DriveNotConfiguredError,
    FileTooLargeError,
)
from apps.drive_relay.application.oauth.exceptions import (
    InvalidStateError,
    OAuthDeniedError,
    OAuthNotConfiguredError,
    OAuthProviderUnavailableError,
    ResultNotFoundError,
    TokenExchangeError,
    TokenRefreshError,
)
from apps.drive_relay.application.proxy.exceptions import ProxyPayloadTooLargeError
from apps.drive_relay.domain.exceptions import (
    HostNotAllowedError,
    InvalidCompositeStateError,
    InvalidFileIdError,
    InvalidProxyTargetError,
)

# 구체 예외가 앞에 오도록 유지 (isinstance 순차 매칭)
ERROR_TABLE: tuple[tuple[type[Exception], int, str], ...] = (
    (OAuthNotConfiguredError, 500, "NOT_CONFIGURED"),
    (DriveNotConfiguredError, 500, "NOT_CONFIGURED"),
    (MissingParameterError, 400, "MISSING_PARAMETER"),
    (InvalidFileIdError, 400, "INVALID_FILE_ID"),
    (InvalidProxyTargetError, 400, "INVALID_URL"),
    (HostNotAllowedError, 400, "HOST_NOT_ALLOWED"),
    (InvalidCompositeStateError, 400, "INVALID_STATE"),
    (OAuthDeniedError, 400, "OAUTH_DENIED"),
    (InvalidStateError, 400, "INVALID_STATE"),
    (TokenExchangeError, 400, "TOKEN_EXCHANGE_FAILED"),
    (TokenRefreshError, 400, "TOKEN_REFRESH_FAILED"),
    (ResultNotFoundError, 404, "NO_RESULT"),
    (DriveFileNotFoundError, 404, "FILE_NOT_FOUND"),
    (DriveAccessDeniedError, 403, "ACCESS_DENIED"),
    (FileTooLargeError, 413, "FILE_TOO_LARGE"),
    (ProxyPayloadTooLargeError, 400, "FILE_TOO_LARGE"),
    (PayloadTooLargeError, 413, "FILE_TOO_LARGE"),
    (RateLimitExceededError, 429, "RATE_LIMITED"),
    (UpstreamError, 502, "UPSTREAM_ERROR"),
    (OAuthProviderUnavailableError, 502, "UPSTREAM_ERROR"),
    (DriveApiError, 500, "DRIVE_ERROR"),
)


def translate_error(exc: Exception) -> tuple[int, str]:
    """예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드). 표에 없는 예외는 (400, "BAD_REQUEST")
    """
    for error_type, status_code, code in ERROR_TABLE:
        if isinstance(exc, error_type):
            return status_code, code
    return 400, "BAD_REQUEST"
