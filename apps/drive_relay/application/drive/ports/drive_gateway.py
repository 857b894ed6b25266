"""DriveGateway Port."""

from __future__ import annotations

from typing import Protocol

from apps.drive_relay.application.common.dto import ByteStream
from apps.drive_relay.application.drive.dto import DriveFileInfo


class DriveGateway(Protocol):
    """Drive API Gateway 인터페이스.

    서비스 계정 자격 증명이 없어도 생성은 성공하며
    is_configured()로 사용 가능 여부를 확인합니다.

    구현체:
        - GoogleDriveClient (infrastructure/google_drive/)
    """

    def is_configured(self) -> bool:
        ...

    async def get_file_info(self, file_id: str) -> DriveFileInfo:
        """파일 메타데이터 조회.

        Raises:
            DriveFileNotFoundError: 404
            DriveAccessDeniedError: 403
            DriveApiError: 그 밖의 실패
        """
        ...

    async def open_content(self, file_id: str) -> ByteStream:
        """파일 본문 스트림 열기 (alt=media).

        Raises:
            DriveFileNotFoundError, DriveAccessDeniedError, DriveApiError
        """
        ...
