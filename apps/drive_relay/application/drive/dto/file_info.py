"""Drive DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.drive_relay.application.common.dto import ByteStream
from apps.drive_relay.domain.services import FileKind


@dataclass(frozen=True)
class DriveFileInfo:
    """Drive files.get 응답 중 사용하는 필드."""

    id: str
    name: str
    mime_type: str
    size: int | None = None
    created_time: str | None = None
    modified_time: str | None = None
    web_view_link: str | None = None
    web_content_link: str | None = None
    thumbnail_link: str | None = None
    parents: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileInfoResult:
    """메타데이터 조회 결과 (분류/포맷 포함)."""

    info: DriveFileInfo
    kind: FileKind
    size_formatted: str
    download_url: str


@dataclass
class FileDownload:
    """다운로드 준비 결과.

    stream은 호출자가 소비하고 닫아야 합니다.
    """

    info: DriveFileInfo
    content_type: str
    stream: ByteStream
