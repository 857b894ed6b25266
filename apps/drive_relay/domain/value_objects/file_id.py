"""FileId Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.drive_relay.domain.exceptions.validation import InvalidFileIdError

# Google Drive 파일 ID: 28~33자, 영숫자와 '_', '-'
FILE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{28,33}$")


@dataclass(frozen=True, slots=True)
class FileId:
    """Drive 파일 ID Value Object.

    형식이 맞지 않는 ID는 업스트림 호출 전에 거부됩니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise InvalidFileIdError()

    @staticmethod
    def is_valid(value: str | None) -> bool:
        """ID 형식 검증."""
        return bool(value) and FILE_ID_PATTERN.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value
