"""Stream DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable


@dataclass
class ByteStream:
    """업스트림 응답 본문 스트림.

    Attributes:
        chunks: 본문 바이트 청크 이터레이터
        aclose: 업스트림 연결 해제 콜백
        content_type: 업스트림 Content-Type (없으면 None)
        content_length: 선언된 길이 (없거나 해석 불가하면 None)
    """

    chunks: AsyncIterator[bytes]
    aclose: Callable[[], Awaitable[None]]
    content_type: str | None = None
    content_length: int | None = None
