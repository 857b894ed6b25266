"""Drive Exceptions."""

from apps.drive_relay.application.common.exceptions.base import ApplicationError


class DriveNotConfiguredError(ApplicationError):
    """서비스 계정 자격 증명 미설정."""

    def __init__(self, reason: str = "Server not configured") -> None:
        super().__init__(reason)


class DriveFileNotFoundError(ApplicationError):
    """파일이 없거나 서비스 계정에 보이지 않음."""

    def __init__(self, file_id: str) -> None:
        self.file_id = file_id
        super().__init__("File not found")


class DriveAccessDeniedError(ApplicationError):
    """파일 접근 권한 없음."""

    def __init__(self, file_id: str) -> None:
        self.file_id = file_id
        super().__init__("Access denied. Check file permissions and service account access.")


class DriveApiError(ApplicationError):
    """Drive API 호출 실패."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(f"Drive API error: {reason}")


class FileTooLargeError(ApplicationError):
    """선언된 파일 크기가 다운로드 상한 초과."""

    def __init__(self, size: int, max_bytes: int) -> None:
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")
