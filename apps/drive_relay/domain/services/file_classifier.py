"""File Classifier.

MIME 타입 분류, 응답 Content-Type 결정, 사람이 읽는 크기 포맷을 담당합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# 다운로드 응답에 그대로 전달하는 MIME 타입
KNOWN_CONTENT_TYPES = frozenset(
    {
        "application/pdf",
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "text/plain",
        "text/csv",
        "application/json",
        "application/zip",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-powerpoint",
    }
)

DOCUMENT_TYPES = frozenset(
    {
        "application/vnd.google-apps.document",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/msword",
        "text/plain",
        "text/html",
        "text/rtf",
    }
)

ARCHIVE_TYPES = frozenset(
    {
        "application/zip",
        "application/x-rar-compressed",
        "application/x-7z-compressed",
        "application/gzip",
        "application/x-tar",
    }
)

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


@dataclass(frozen=True, slots=True)
class FileKind:
    """MIME 타입 기반 분류 플래그."""

    is_image: bool
    is_document: bool
    is_spreadsheet: bool
    is_presentation: bool
    is_pdf: bool
    is_video: bool
    is_audio: bool
    is_archive: bool


def classify_mime_type(mime_type: str) -> FileKind:
    """MIME 타입을 분류합니다."""
    return FileKind(
        is_image=mime_type.startswith("image/"),
        is_document=mime_type in DOCUMENT_TYPES,
        is_spreadsheet="spreadsheet" in mime_type or "excel" in mime_type,
        is_presentation="presentation" in mime_type or "powerpoint" in mime_type,
        is_pdf=mime_type == "application/pdf",
        is_video=mime_type.startswith("video/"),
        is_audio=mime_type.startswith("audio/"),
        is_archive=mime_type in ARCHIVE_TYPES,
    )


def resolve_content_type(mime_type: str | None) -> str:
    """다운로드 응답용 Content-Type (모르는 타입은 octet-stream)."""
    if mime_type in KNOWN_CONTENT_TYPES:
        return mime_type
    return DEFAULT_CONTENT_TYPE


def format_file_size(size: int) -> str:
    """바이트 수를 1024 단위 문자열로 변환.

    예시:
        0 -> "0 Bytes", 1536 -> "1.5 KB", 1048576 -> "1 MB"
    """
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"
