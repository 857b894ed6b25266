"""Validation Exceptions."""

from apps.drive_relay.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패."""

    pass


class InvalidFileIdError(ValidationError):
    """Drive 파일 ID 형식 오류."""

    def __init__(self, message: str = "Invalid file ID format") -> None:
        super().__init__(message)


class InvalidCompositeStateError(ValidationError):
    """복합 state (sessionId:state) 형식 오류."""

    def __init__(self, message: str = "Invalid state") -> None:
        super().__init__(message)


class InvalidProxyTargetError(ValidationError):
    """프록시 대상 URL 형식 오류 (절대 http/https URL만 허용)."""

    def __init__(self, message: str = "Invalid or unsupported url") -> None:
        super().__init__(message)


class HostNotAllowedError(ValidationError):
    """허용 목록에 없는 호스트."""

    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__("Host not allowed")
