"""Google Drive Client.

DriveGateway 포트의 구현체입니다. Drive v3 REST API를 httpx로 호출합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from apps.drive_relay.application.common.dto import ByteStream
from apps.drive_relay.application.drive.dto import DriveFileInfo
from apps.drive_relay.application.drive.exceptions import (
    DriveAccessDeniedError,
    DriveApiError,
    DriveFileNotFoundError,
)
from apps.drive_relay.infrastructure.http.upstream_fetcher_httpx import declared_length

if TYPE_CHECKING:
    from apps.drive_relay.infrastructure.google_drive.credentials import (
        ServiceAccountTokenSource,
    )

logger = logging.getLogger(__name__)

DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files/{file_id}"
FILE_FIELDS = (
    "id,name,mimeType,size,createdTime,modifiedTime,"
    "webViewLink,webContentLink,thumbnailLink,parents"
)


def _parse_size(value: Any) -> int | None:
    # Drive는 size를 문자열로 내려줍니다 (Google Docs 계열은 없음)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def to_file_info(data: dict[str, Any]) -> DriveFileInfo:
    """files.get 응답을 DriveFileInfo로 변환."""
    return DriveFileInfo(
        id=data["id"],
        name=data.get("name", ""),
        mime_type=data.get("mimeType", ""),
        size=_parse_size(data.get("size")),
        created_time=data.get("createdTime"),
        modified_time=data.get("modifiedTime"),
        web_view_link=data.get("webViewLink"),
        web_content_link=data.get("webContentLink"),
        thumbnail_link=data.get("thumbnailLink"),
        parents=list(data.get("parents") or []),
    )


class GoogleDriveClient:
    """서비스 계정으로 인증하는 Drive 클라이언트."""

    def __init__(self, client: httpx.AsyncClient, tokens: "ServiceAccountTokenSource") -> None:
        self._client = client
        self._tokens = tokens

    def is_configured(self) -> bool:
        return self._tokens.is_configured()

    async def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {await self._tokens.get_token()}"}

    def _raise_for_status(self, file_id: str, response: httpx.Response) -> None:
        if response.is_success:
            return
        if response.status_code == 404:
            raise DriveFileNotFoundError(file_id)
        if response.status_code == 403:
            raise DriveAccessDeniedError(file_id)
        logger.error(
            "Drive API returned error",
            extra={"file_id": file_id, "status_code": response.status_code},
        )
        raise DriveApiError(f"status {response.status_code}", status_code=response.status_code)

    async def get_file_info(self, file_id: str) -> DriveFileInfo:
        url = DRIVE_FILES_URL.format(file_id=file_id)
        try:
            response = await self._client.get(
                url,
                params={"fields": FILE_FIELDS},
                headers=await self._headers(),
            )
        except httpx.HTTPError as e:
            raise DriveApiError(str(e)) from e

        self._raise_for_status(file_id, response)
        return to_file_info(response.json())

    async def open_content(self, file_id: str) -> ByteStream:
        request = self._client.build_request(
            "GET",
            DRIVE_FILES_URL.format(file_id=file_id),
            params={"alt": "media"},
            headers=await self._headers(),
        )
        try:
            response = await self._client.send(request, stream=True, follow_redirects=True)
        except httpx.HTTPError as e:
            raise DriveApiError(str(e)) from e

        if not response.is_success:
            await response.aclose()
            self._raise_for_status(file_id, response)

        return ByteStream(
            chunks=response.aiter_bytes(),
            aclose=response.aclose,
            content_type=response.headers.get("content-type"),
            content_length=declared_length(response),
        )
