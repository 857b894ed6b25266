"""Drive HTTP Schemas."""

from pydantic import Field

from apps.drive_relay.application.drive.dto import FileInfoResult
from apps.drive_relay.presentation.http.schemas.base import CamelModel


class FileInfoResponse(CamelModel):
    """파일 정보 응답."""

    id: str
    name: str
    mime_type: str
    size: int | None = Field(None, description="바이트 (Google 문서 계열은 없음)")
    size_formatted: str
    created_time: str | None = None
    modified_time: str | None = None
    web_view_link: str | None = None
    download_url: str
    thumbnail_link: str | None = None
    parents: list[str] = Field(default_factory=list)
    is_image: bool
    is_document: bool
    is_spreadsheet: bool
    is_presentation: bool
    is_pdf: bool
    is_video: bool
    is_audio: bool
    is_archive: bool

    @classmethod
    def from_result(cls, result: FileInfoResult) -> "FileInfoResponse":
        info, kind = result.info, result.kind
        return cls(
            id=info.id,
            name=info.name,
            mime_type=info.mime_type,
            size=info.size,
            size_formatted=result.size_formatted,
            created_time=info.created_time,
            modified_time=info.modified_time,
            web_view_link=info.web_view_link,
            download_url=result.download_url,
            thumbnail_link=info.thumbnail_link,
            parents=list(info.parents),
            is_image=kind.is_image,
            is_document=kind.is_document,
            is_spreadsheet=kind.is_spreadsheet,
            is_presentation=kind.is_presentation,
            is_pdf=kind.is_pdf,
            is_video=kind.is_video,
            is_audio=kind.is_audio,
            is_archive=kind.is_archive,
        )
