"""Shared HTTP client.

프로세스 전체에서 하나의 httpx.AsyncClient(연결 풀)를 공유합니다.
lifespan 종료 시 close_http_client()로 닫습니다.
"""

from __future__ import annotations

import httpx

DEFAULT_TIMEOUT_SECONDS = 30.0
USER_AGENT = "drive-relay/1.0"

_client: httpx.AsyncClient | None = None


def get_http_client(timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"User-Agent": USER_AGENT},
        )
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
