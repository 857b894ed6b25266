"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
저장소/클라이언트는 프로세스 단위 싱글턴이고 Interactor는 요청마다 생성합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from apps.drive_relay.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import httpx
    import redis.asyncio as aioredis

    from apps.drive_relay.application.common.ports import RateLimiter
    from apps.drive_relay.application.drive.ports import DriveGateway
    from apps.drive_relay.application.drive.queries import DownloadFileQuery, GetFileInfoQuery
    from apps.drive_relay.application.oauth.commands import (
        OAuthCallbackInteractor,
        OAuthFinalInteractor,
        OAuthPollInteractor,
        OAuthStartInteractor,
        TokenRefreshInteractor,
    )
    from apps.drive_relay.application.oauth.ports import OAuthProviderGateway, SessionStore
    from apps.drive_relay.application.proxy.commands import ProxyFetchCommand
    from apps.drive_relay.infrastructure.google_drive import ServiceAccountTokenSource


# ============================================================
# Infrastructure Dependencies
# ============================================================


_redis_clients: dict[str, "aioredis.Redis"] = {}


def _redis(redis_url: str) -> "aioredis.Redis":
    client = _redis_clients.get(redis_url)
    if client is None:
        from apps.drive_relay.infrastructure.persistence_redis import build_redis_client

        client = _redis_clients[redis_url] = build_redis_client(redis_url)
    return client


@lru_cache
def _memory_session_store() -> "SessionStore":
    from apps.drive_relay.infrastructure.persistence_memory import InMemorySessionStore

    return InMemorySessionStore()


@lru_cache
def _memory_rate_limiter() -> "RateLimiter":
    from apps.drive_relay.infrastructure.persistence_memory import InMemoryRateLimiter

    return InMemoryRateLimiter()


@lru_cache
def _token_source(email: str | None, private_key: str | None) -> "ServiceAccountTokenSource":
    from apps.drive_relay.infrastructure.google_drive import ServiceAccountTokenSource

    return ServiceAccountTokenSource(email, private_key)


def get_http_client(settings: Settings = Depends(get_settings)) -> "httpx.AsyncClient":
    """공유 httpx 클라이언트 제공자."""
    from apps.drive_relay.infrastructure.http import get_http_client as _get_http_client

    return _get_http_client(settings.http_timeout_seconds)


def get_session_store(settings: Settings = Depends(get_settings)) -> "SessionStore":
    """SessionStore 제공자 (RELAY_STORE_BACKEND로 선택)."""
    if settings.store_backend == "redis":
        from apps.drive_relay.infrastructure.persistence_redis import RedisSessionStore

        return RedisSessionStore(_redis(settings.redis_url))
    return _memory_session_store()


def get_rate_limiter(settings: Settings = Depends(get_settings)) -> "RateLimiter":
    """RateLimiter 제공자."""
    if settings.store_backend == "redis":
        from apps.drive_relay.infrastructure.persistence_redis import RedisRateLimiter

        return RedisRateLimiter(_redis(settings.redis_url))
    return _memory_rate_limiter()


async def close_redis_clients() -> None:
    """생성된 Redis 클라이언트 연결 해제 (lifespan 종료 시)."""
    while _redis_clients:
        _, client = _redis_clients.popitem()
        await client.aclose()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


def get_oauth_provider(
    settings: Settings = Depends(get_settings),
    client: "httpx.AsyncClient" = Depends(get_http_client),
) -> "OAuthProviderGateway":
    """Google OAuth provider 제공자."""
    from apps.drive_relay.infrastructure.oauth import GoogleOAuthProvider

    return GoogleOAuthProvider.from_settings(settings, client)


def get_drive_gateway(
    settings: Settings = Depends(get_settings),
    client: "httpx.AsyncClient" = Depends(get_http_client),
) -> "DriveGateway":
    """Drive Gateway 제공자."""
    from apps.drive_relay.infrastructure.google_drive import GoogleDriveClient

    tokens = _token_source(
        settings.google_service_account_email,
        settings.google_service_account_private_key,
    )
    return GoogleDriveClient(client, tokens)


def get_upstream_fetcher(client: "httpx.AsyncClient" = Depends(get_http_client)):
    """UpstreamFetcher 제공자."""
    from apps.drive_relay.infrastructure.http import HttpxUpstreamFetcher

    return HttpxUpstreamFetcher(client)


# ============================================================
# Use Case Dependencies
# ============================================================


def get_oauth_start_interactor(
    settings: Settings = Depends(get_settings),
    session_store: "SessionStore" = Depends(get_session_store),
    provider: "OAuthProviderGateway" = Depends(get_oauth_provider),
) -> "OAuthStartInteractor":
    from apps.drive_relay.application.oauth.commands import OAuthStartInteractor

    return OAuthStartInteractor(
        session_store,
        provider,
        session_ttl_seconds=settings.oauth_session_ttl_seconds,
    )


def get_oauth_callback_interactor(
    settings: Settings = Depends(get_settings),
    session_store: "SessionStore" = Depends(get_session_store),
    provider: "OAuthProviderGateway" = Depends(get_oauth_provider),
) -> "OAuthCallbackInteractor":
    from apps.drive_relay.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(
        session_store,
        provider,
        result_ttl_seconds=settings.oauth_session_ttl_seconds,
    )


def get_oauth_poll_interactor(
    session_store: "SessionStore" = Depends(get_session_store),
) -> "OAuthPollInteractor":
    from apps.drive_relay.application.oauth.commands import OAuthPollInteractor

    return OAuthPollInteractor(session_store)


def get_oauth_final_interactor(
    session_store: "SessionStore" = Depends(get_session_store),
) -> "OAuthFinalInteractor":
    from apps.drive_relay.application.oauth.commands import OAuthFinalInteractor

    return OAuthFinalInteractor(session_store)


def get_token_refresh_interactor(
    provider: "OAuthProviderGateway" = Depends(get_oauth_provider),
) -> "TokenRefreshInteractor":
    from apps.drive_relay.application.oauth.commands import TokenRefreshInteractor

    return TokenRefreshInteractor(provider)


def get_file_info_query(
    drive: "DriveGateway" = Depends(get_drive_gateway),
) -> "GetFileInfoQuery":
    from apps.drive_relay.application.drive.queries import GetFileInfoQuery

    return GetFileInfoQuery(drive)


def get_download_file_query(
    settings: Settings = Depends(get_settings),
    drive: "DriveGateway" = Depends(get_drive_gateway),
) -> "DownloadFileQuery":
    from apps.drive_relay.application.drive.queries import DownloadFileQuery

    return DownloadFileQuery(drive, max_bytes=settings.max_payload_bytes)


def get_proxy_fetch_command(
    settings: Settings = Depends(get_settings),
    fetcher=Depends(get_upstream_fetcher),
) -> "ProxyFetchCommand":
    from apps.drive_relay.application.proxy.commands import ProxyFetchCommand

    return ProxyFetchCommand(
        fetcher,
        whitelist=settings.proxy_whitelist,
        max_bytes=settings.max_payload_bytes,
    )
