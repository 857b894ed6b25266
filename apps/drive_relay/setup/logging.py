"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.drive_relay.setup.config import Settings

NOISY_LOGGERS = ("httpx", "httpcore", "google.auth", "urllib3")


def setup_logging(settings: "Settings") -> None:
    """로깅 설정."""
    # ECS JSON 포맷터
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    base_factory = logging.getLogRecordFactory()
    # 재호출 시 factory가 중첩되지 않도록 원본을 보관
    base_factory = getattr(base_factory, "_base_factory", base_factory)

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    record_factory._base_factory = base_factory  # type: ignore[attr-defined]
    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
