"""Service Account Credentials.

google-auth 서비스 계정 자격 증명으로 Drive API용 access token을 발급/갱신합니다.
"""

from __future__ import annotations

import asyncio
import logging

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from apps.drive_relay.application.drive.exceptions import DriveApiError

logger = logging.getLogger(__name__)

DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"
TOKEN_URI = "https://oauth2.googleapis.com/token"


def normalize_private_key(private_key: str) -> str:
    """환경변수에 들어간 literal "\\n"을 실제 개행으로 변환."""
    return private_key.replace("\\n", "\n")


class ServiceAccountTokenSource:
    """서비스 계정 access token 공급자.

    email 또는 private key가 없으면 is_configured()가 False이며
    생성 단계에서 예외를 던지지 않습니다.
    """

    def __init__(self, client_email: str | None, private_key: str | None) -> None:
        self._client_email = client_email
        self._private_key = normalize_private_key(private_key) if private_key else None
        self._credentials: service_account.Credentials | None = None
        self._lock = asyncio.Lock()

    def is_configured(self) -> bool:
        return bool(self._client_email and self._private_key)

    def _build_credentials(self) -> service_account.Credentials:
        info = {
            "client_email": self._client_email,
            "private_key": self._private_key,
            "token_uri": TOKEN_URI,
        }
        return service_account.Credentials.from_service_account_info(
            info, scopes=[DRIVE_READONLY_SCOPE]
        )

    async def get_token(self) -> str:
        """유효한 access token 반환 (만료 시 갱신).

        Raises:
            DriveApiError: 자격 증명 생성 또는 갱신 실패
        """
        async with self._lock:
            try:
                if self._credentials is None:
                    self._credentials = self._build_credentials()
                if not self._credentials.valid:
                    # google-auth refresh는 동기 호출
                    await asyncio.to_thread(self._credentials.refresh, Request())
            except (GoogleAuthError, ValueError) as e:
                logger.error("Service account token refresh failed", extra={"error": str(e)})
                raise DriveApiError(str(e)) from e

            return self._credentials.token
