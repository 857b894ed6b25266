"""Access Log.

Drive 다운로드/정보 조회 결과, 보안 이벤트, rate limit, 헬스 상태를
클라이언트 IP와 User-Agent를 포함한 구조화 로그로 남깁니다.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request

from apps.drive_relay.application.drive.exceptions import DriveNotConfiguredError
from apps.drive_relay.domain.exceptions import InvalidFileIdError
from apps.drive_relay.presentation.http.utils.client_ip import get_client_ip, get_user_agent

logger = logging.getLogger("apps.drive_relay.access")

SERVICE_DOWNLOAD = "DRIVE_DOWNLOAD"
SERVICE_INFO = "DRIVE_INFO"
SERVICE_SECURITY = "SECURITY"
SERVICE_HEALTH = "HEALTH_CHECK"


def _log(
    level: int,
    request: Request,
    *,
    service: str,
    action: str,
    success: bool,
    **fields: Any,
) -> None:
    extra: dict[str, Any] = {
        "service_name": service,
        "action": action,
        "client_ip": get_client_ip(request),
        "user_agent": get_user_agent(request),
        "success": success,
    }
    extra.update({key: value for key, value in fields.items() if value is not None})
    logger.log(level, f"{service} {action}", extra=extra)


def log_download(
    request: Request,
    file_id: str,
    success: bool,
    error: str | None = None,
    file_size: int | None = None,
    response_time_ms: float | None = None,
) -> None:
    _log(
        logging.INFO if success else logging.ERROR,
        request,
        service=SERVICE_DOWNLOAD,
        action="DOWNLOAD",
        success=success,
        file_id=file_id,
        error=error,
        file_size=file_size,
        response_time_ms=response_time_ms,
    )


def log_info(
    request: Request,
    file_id: str,
    success: bool,
    error: str | None = None,
    response_time_ms: float | None = None,
) -> None:
    _log(
        logging.INFO if success else logging.ERROR,
        request,
        service=SERVICE_INFO,
        action="GET_INFO",
        success=success,
        file_id=file_id,
        error=error,
        response_time_ms=response_time_ms,
    )


def log_rate_limit(
    request: Request, service: str, action: str, file_id: str | None = None
) -> None:
    _log(
        logging.WARNING,
        request,
        service=service,
        action=f"{action}_RATE_LIMIT",
        success=False,
        file_id=file_id,
        error="Rate limit exceeded",
    )


def log_security(request: Request, action: str, details: str) -> None:
    _log(
        logging.WARNING,
        request,
        service=SERVICE_SECURITY,
        action=action,
        success=False,
        error=details,
    )


def log_health(request: Request, service: str, up: bool, error: str | None = None) -> None:
    status = "UP" if up else "DOWN"
    _log(
        logging.INFO if up else logging.ERROR,
        request,
        service=SERVICE_HEALTH,
        action=f"{service}_{status}",
        success=up,
        error=error,
    )


def log_drive_failure(
    request: Request,
    service: str,
    file_id: str,
    exc: Exception,
    response_time_ms: float | None = None,
) -> None:
    """Drive 엔드포인트 실패를 종류별로 기록."""
    if isinstance(exc, InvalidFileIdError):
        log_security(request, "INVALID_FILE_ID", f"Invalid file ID format: {file_id}")
        return
    if isinstance(exc, DriveNotConfiguredError):
        log_health(request, "DRIVE_SERVICE", up=False, error="Service not configured")
        return

    error = getattr(exc, "message", str(exc))
    if service == SERVICE_DOWNLOAD:
        log_download(request, file_id, False, error=error, response_time_ms=response_time_ms)
    else:
        log_info(request, file_id, False, error=error, response_time_ms=response_time_ms)
