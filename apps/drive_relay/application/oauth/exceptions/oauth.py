"""OAuth Exceptions."""

from apps.drive_relay.application.common.exceptions.base import ApplicationError


class OAuthNotConfiguredError(ApplicationError):
    """provider client id / callback 주소 미설정 (재시도 대상 아님)."""

    def __init__(self, reason: str = "Server not configured") -> None:
        super().__init__(reason)


class OAuthDeniedError(ApplicationError):
    """provider가 error 파라미터로 콜백 (동의 거부 등)."""

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(error)


class InvalidStateError(ApplicationError):
    """세션이 없거나 state 불일치."""

    def __init__(self, reason: str = "Invalid state") -> None:
        super().__init__(reason)


class ResultNotFoundError(ApplicationError):
    """가져갈 교환 결과 없음."""

    def __init__(self, reason: str = "No result") -> None:
        super().__init__(reason)


class TokenEndpointError(ApplicationError):
    """token endpoint가 비정상 상태 코드로 응답."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Token endpoint returned {status_code}")


class TokenExchangeError(ApplicationError):
    """인증 코드 교환 실패."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__("Token exchange failed")


class TokenRefreshError(ApplicationError):
    """refresh token 교환 실패."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__("Refresh failed")


class OAuthProviderUnavailableError(ApplicationError):
    """provider 통신 실패 (네트워크 오류)."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"OAuth provider error ({provider}): {reason}")
