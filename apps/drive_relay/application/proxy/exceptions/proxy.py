"""Proxy Exceptions."""

from apps.drive_relay.application.common.exceptions.limits import PayloadTooLargeError


class ProxyPayloadTooLargeError(PayloadTooLargeError):
    """HEAD로 확인한 선언 크기가 상한 초과 (요청 오류로 응답)."""

    def __init__(self, declared_length: int, max_bytes: int) -> None:
        self.declared_length = declared_length
        super().__init__(max_bytes)
