"""Request Validation Exceptions."""

from apps.drive_relay.application.common.exceptions.base import ApplicationError


class MissingParameterError(ApplicationError):
    """필수 파라미터 누락."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
