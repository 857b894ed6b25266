"""GetFileInfo Query.

Drive 파일 메타데이터를 조회하고 분류/포맷 정보를 덧붙입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.drive_relay.application.drive.dto import FileInfoResult
from apps.drive_relay.application.drive.exceptions import DriveNotConfiguredError
from apps.drive_relay.domain.services import classify_mime_type, format_file_size
from apps.drive_relay.domain.value_objects import FileId

if TYPE_CHECKING:
    from apps.drive_relay.application.drive.ports import DriveGateway

logger = logging.getLogger(__name__)

DOWNLOAD_PATH = "/download/{file_id}"


class GetFileInfoQuery:
    """파일 정보 조회 Query.

    Workflow:
        1. 파일 ID 형식 검증 (업스트림 호출 전)
        2. Drive 설정 확인
        3. 메타데이터 조회 후 MIME 분류
    """

    def __init__(self, drive: "DriveGateway") -> None:
        self._drive = drive

    async def execute(self, raw_file_id: str) -> FileInfoResult:
        """
        Raises:
            InvalidFileIdError: ID 형식 오류
            DriveNotConfiguredError: 자격 증명 미설정
        """
        file_id = FileId(raw_file_id)

        if not self._drive.is_configured():
            raise DriveNotConfiguredError()

        info = await self._drive.get_file_info(file_id.value)

        return FileInfoResult(
            info=info,
            kind=classify_mime_type(info.mime_type),
            size_formatted=format_file_size(info.size or 0),
            download_url=DOWNLOAD_PATH.format(file_id=info.id),
        )
