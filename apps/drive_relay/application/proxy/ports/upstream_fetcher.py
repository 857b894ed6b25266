"""UpstreamFetcher Port."""

from __future__ import annotations

from typing import Protocol

from apps.drive_relay.application.common.dto import ByteStream


class UpstreamFetcher(Protocol):
    """임의 URL fetch 인터페이스 (리다이렉트 추적).

    구현체:
        - HttpxUpstreamFetcher (infrastructure/http/)
    """

    async def head_content_length(self, url: str) -> int | None:
        """HEAD 요청으로 선언 길이 확인.

        Raises:
            UpstreamError: 네트워크 오류
        """
        ...

    async def open(self, url: str) -> ByteStream:
        """GET 요청 후 본문 스트림 반환.

        Raises:
            UpstreamError: 비정상 상태 코드 또는 네트워크 오류
        """
        ...
