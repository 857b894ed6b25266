"""Application Settings.

env_prefix="RELAY_" 사용으로 RELAY_GOOGLE_CLIENT_ID 등의 환경변수 매핑.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://www.figma.com",
    "null",
)


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """애플리케이션 설정.

    예시:
        RELAY_GOOGLE_CLIENT_ID → google_client_id
        RELAY_STORE_BACKEND=redis → store_backend
    """

    # Service
    app_name: str = "Drive Relay API"
    environment: str = "local"
    log_level: str = "INFO"
    service_name: str = "drive-relay"
    service_version: str = "1.0.0"

    # Google OAuth (사용자 토큰 발급)
    google_client_id: Optional[str] = None
    google_client_secret: Optional[str] = None
    google_redirect_uri: Optional[str] = None
    google_scope: Optional[str] = None

    # Google Drive (서비스 계정)
    google_service_account_email: Optional[str] = None
    google_service_account_private_key: Optional[str] = None

    # CORS / Proxy (쉼표 구분)
    cors_allowed_origins: str = ""
    proxy_whitelist_domains: str = ""

    # Session store
    store_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    oauth_session_ttl_seconds: int = 600
    sweep_interval_seconds: float = 60.0

    # Limits
    max_payload_bytes: int = 20 * 1024 * 1024
    rate_limit_window_seconds: int = 60
    download_rate_limit: int = 10
    info_rate_limit: int = 30

    # HTTP client
    http_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="RELAY_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("google_service_account_private_key")
    @classmethod
    def normalize_private_key(cls, value: Optional[str]) -> Optional[str]:
        """literal "\\n" 시퀀스를 개행으로 변환."""
        if value is None:
            return None
        return value.replace("\\n", "\n")

    @property
    def cors_origins(self) -> list[str]:
        """기본 허용 오리진 + 설정 추가분 (중복 제거, 순서 유지)."""
        origins = list(DEFAULT_CORS_ORIGINS)
        for origin in _split_csv(self.cors_allowed_origins):
            if origin not in origins:
                origins.append(origin)
        return origins

    @property
    def proxy_whitelist(self) -> list[str]:
        return [domain.lower() for domain in _split_csv(self.proxy_whitelist_domains)]


@lru_cache
def get_settings() -> Settings:
    """캐시된 설정 인스턴스 반환."""
    return Settings()
