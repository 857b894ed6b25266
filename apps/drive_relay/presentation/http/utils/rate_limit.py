"""Rate Limit Dependencies.

Drive 엔드포인트 앞단에서 클라이언트 IP 기준 요청 수를 제한합니다.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Depends, Request

from apps.drive_relay.application.common.exceptions import RateLimitExceededError
from apps.drive_relay.application.common.ports import RateLimiter
from apps.drive_relay.presentation.http.utils.access_log import log_rate_limit
from apps.drive_relay.presentation.http.utils.client_ip import get_client_ip
from apps.drive_relay.setup.config import Settings, get_settings
from apps.drive_relay.setup.dependencies import get_rate_limiter


def rate_limit_key(scope: str, client_ip: str) -> str:
    return f"rate_limit:{scope}:{client_ip}"


def rate_limited(
    scope: str,
    *,
    service: str,
    action: str,
    limit: Callable[[Settings], int],
) -> Callable[..., Awaitable[None]]:
    """scope별 rate limit Depends 생성.

    Args:
        scope: 카운터 키 구분자 (예: "download")
        service: access log 서비스 이름
        action: access log 액션 이름
        limit: 설정에서 윈도우당 허용 횟수를 꺼내는 함수
    """

    async def dependency(
        request: Request,
        file_id: str,
        limiter: RateLimiter = Depends(get_rate_limiter),
        settings: Settings = Depends(get_settings),
    ) -> None:
        key = rate_limit_key(scope, get_client_ip(request))
        status = await limiter.hit(key, limit(settings), settings.rate_limit_window_seconds)
        if not status.is_allowed:
            log_rate_limit(request, service, action, file_id)
            raise RateLimitExceededError(key, status.limit, status.reset_at)

    return dependency
