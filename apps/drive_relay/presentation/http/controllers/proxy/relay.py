"""Proxy Controller.

허용된 호스트의 파일을 20MiB 상한 내에서 중계합니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from apps.drive_relay.application.common.services import relay_limited
from apps.drive_relay.application.proxy.commands import ProxyFetchCommand
from apps.drive_relay.domain.services import DEFAULT_CONTENT_TYPE
from apps.drive_relay.setup.config import Settings, get_settings
from apps.drive_relay.setup.dependencies import get_proxy_fetch_command

router = APIRouter()

PROXY_CACHE_CONTROL = "public, max-age=3600"


@router.get("/proxy", summary="파일 프록시")
async def proxy(
    url: str | None = Query(None, description="대상 URL (http/https)"),
    command: ProxyFetchCommand = Depends(get_proxy_fetch_command),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    stream = await command.execute(url)
    headers = {
        "Content-Type": stream.content_type or DEFAULT_CONTENT_TYPE,
        "Cache-Control": PROXY_CACHE_CONTROL,
    }
    return StreamingResponse(relay_limited(stream, settings.max_payload_bytes), headers=headers)
