"""Resource Limit Exceptions."""

from apps.drive_relay.application.common.exceptions.base import ApplicationError


class PayloadTooLargeError(ApplicationError):
    """전송량이 상한을 초과.

    스트리밍 도중 발생하면 응답이 중단됩니다.
    """

    def __init__(self, max_bytes: int, message: str = "File too large") -> None:
        self.max_bytes = max_bytes
        super().__init__(message)


class RateLimitExceededError(ApplicationError):
    """클라이언트별 요청 한도 초과."""

    def __init__(self, key: str, limit: int, reset_at: float) -> None:
        self.key = key
        self.limit = limit
        self.reset_at = reset_at
        super().__init__("Rate limit exceeded. Please try again later.")


class UpstreamError(ApplicationError):
    """업스트림(파일 호스트) 응답 실패."""

    def __init__(self, message: str = "Upstream not OK", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
