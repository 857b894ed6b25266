"""Stream Limiter.

선언된 Content-Length와 무관하게 실제 전송 바이트를 세어 상한을 강제합니다.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

from apps.drive_relay.application.common.dto.stream import ByteStream
from apps.drive_relay.application.common.exceptions.limits import PayloadTooLargeError

logger = logging.getLogger(__name__)

MAX_PAYLOAD_BYTES = 20 * 1024 * 1024  # 20 MiB


async def limit_chunks(
    chunks: AsyncIterator[bytes],
    max_bytes: int = MAX_PAYLOAD_BYTES,
) -> AsyncIterator[bytes]:
    """누적 바이트가 max_bytes를 넘기 직전에 중단합니다.

    상한을 넘게 만드는 청크는 내보내지 않으므로
    호출자는 max_bytes + 1 바이트 이상을 받지 못합니다.

    Raises:
        PayloadTooLargeError: 누적 바이트가 상한 초과
    """
    total = 0
    async for chunk in chunks:
        total += len(chunk)
        if total > max_bytes:
            logger.warning(
                "Stream aborted: payload limit exceeded",
                extra={"max_bytes": max_bytes, "received_bytes": total},
            )
            raise PayloadTooLargeError(max_bytes)
        yield chunk


async def relay_limited(
    stream: ByteStream,
    max_bytes: int = MAX_PAYLOAD_BYTES,
) -> AsyncIterator[bytes]:
    """ByteStream을 상한 필터를 거쳐 중계하고 끝나면 업스트림을 닫습니다.

    정상 종료, 상한 초과, 클라이언트 연결 종료 모두에서 aclose가 호출됩니다.
    """
    try:
        async for chunk in limit_chunks(stream.chunks, max_bytes):
            yield chunk
    finally:
        await stream.aclose()
