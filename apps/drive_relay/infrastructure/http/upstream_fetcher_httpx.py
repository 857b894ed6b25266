"""Httpx Upstream Fetcher.

UpstreamFetcher 포트의 구현체입니다.
"""

from __future__ import annotations

import logging

import httpx

from apps.drive_relay.application.common.dto import ByteStream
from apps.drive_relay.application.common.exceptions import UpstreamError
from apps.drive_relay.domain.exceptions import InvalidProxyTargetError

logger = logging.getLogger(__name__)


def parse_content_length(value: str | None) -> int | None:
    """Content-Length 헤더 해석 (없거나 숫자가 아니면 None)."""
    if value is None:
        return None
    try:
        length = int(value)
    except ValueError:
        return None
    return length if length >= 0 else None


def declared_length(response: httpx.Response) -> int | None:
    """본문 길이 (압축 전송이면 디코딩 후 길이를 알 수 없으므로 None)."""
    if response.headers.get("content-encoding"):
        return None
    return parse_content_length(response.headers.get("content-length"))


class HttpxUpstreamFetcher:
    """httpx 기반 업스트림 fetcher (리다이렉트 추적)."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def head_content_length(self, url: str) -> int | None:
        try:
            response = await self._client.head(url, follow_redirects=True)
        except httpx.InvalidURL as e:
            raise InvalidProxyTargetError() from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"HEAD failed: {e}") from e
        return parse_content_length(response.headers.get("content-length"))

    async def open(self, url: str) -> ByteStream:
        try:
            request = self._client.build_request("GET", url)
        except httpx.InvalidURL as e:
            raise InvalidProxyTargetError() from e
        try:
            response = await self._client.send(request, stream=True, follow_redirects=True)
        except httpx.HTTPError as e:
            logger.warning("Upstream fetch failed", extra={"url": url, "error": str(e)})
            raise UpstreamError("Upstream fetch failed") from e

        if not response.is_success:
            await response.aclose()
            logger.warning(
                "Upstream returned non-success status",
                extra={"url": url, "status_code": response.status_code},
            )
            raise UpstreamError(status_code=response.status_code)

        return ByteStream(
            chunks=response.aiter_bytes(),
            aclose=response.aclose,
            content_type=response.headers.get("content-type"),
            content_length=declared_length(response),
        )
