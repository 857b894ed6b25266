"""ProxyFetch Command.

허용된 호스트의 파일을 상한 내에서 중계하기 위한 스트림을 엽니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.drive_relay.application.common.dto import ByteStream
from apps.drive_relay.application.common.exceptions import (
    MissingParameterError,
    UpstreamError,
)
from apps.drive_relay.application.common.services import MAX_PAYLOAD_BYTES
from apps.drive_relay.application.proxy.exceptions import ProxyPayloadTooLargeError
from apps.drive_relay.domain.services import resolve_proxy_target

if TYPE_CHECKING:
    from apps.drive_relay.application.proxy.ports import UpstreamFetcher

logger = logging.getLogger(__name__)


class ProxyFetchCommand:
    """프록시 fetch Command.

    Workflow:
        1. URL 검증, 공유 링크 재작성, 호스트 허용 목록 검사
        2. HEAD로 선언 길이 확인 (네트워크 오류는 무시)
        3. GET 스트림 열기
    """

    def __init__(
        self,
        fetcher: "UpstreamFetcher",
        whitelist: list[str] | None = None,
        max_bytes: int = MAX_PAYLOAD_BYTES,
    ) -> None:
        self._fetcher = fetcher
        self._whitelist = whitelist or []
        self._max_bytes = max_bytes

    async def execute(self, raw_url: str | None) -> ByteStream:
        """
        Raises:
            MissingParameterError: url 누락
            InvalidProxyTargetError: http/https 절대 URL 아님
            HostNotAllowedError: 허용 목록 밖 호스트
            ProxyPayloadTooLargeError: 선언 길이 상한 초과
            UpstreamError: GET 실패
        """
        if not raw_url:
            raise MissingParameterError("Missing url")

        target = resolve_proxy_target(raw_url, self._whitelist)

        try:
            declared = await self._fetcher.head_content_length(target)
        except UpstreamError as e:
            logger.debug("HEAD probe failed, continuing", extra={"url": target, "reason": e.message})
            declared = None

        if declared is not None and declared > self._max_bytes:
            raise ProxyPayloadTooLargeError(declared, self._max_bytes)

        return await self._fetcher.open(target)
