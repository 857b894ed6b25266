"""Integration Test Fixtures.

create_app()으로 만든 실제 앱에 외부 HTTP만 MockTransport로 대체합니다.
"""

from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.drive_relay.infrastructure.google_drive import GoogleDriveClient
from apps.drive_relay.infrastructure.http import HttpxUpstreamFetcher
from apps.drive_relay.infrastructure.oauth import GoogleOAuthProvider
from apps.drive_relay.main import create_app
from apps.drive_relay.setup.config import Settings
from apps.drive_relay.setup.dependencies import (
    get_drive_gateway,
    get_oauth_provider,
    get_rate_limiter,
    get_session_store,
    get_upstream_fetcher,
)


class FakeRemote:
    """요청을 기록하고 handler로 응답하는 가짜 원격 서버."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            404
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def google_api() -> FakeRemote:
    """Google token endpoint."""
    remote = FakeRemote()
    remote.handler = lambda request: httpx.Response(
        200,
        json={"access_token": "ya29.token", "refresh_token": "1//refresh", "expires_in": 3599},
    )
    return remote


@pytest.fixture
def drive_api() -> FakeRemote:
    """Drive v3 files API."""
    return FakeRemote()


@pytest.fixture
def files_api() -> FakeRemote:
    """프록시 대상 파일 호스트."""
    return FakeRemote()


@pytest.fixture
def make_app(
    session_store,
    rate_limiter,
    fake_token_source,
    google_api: FakeRemote,
    drive_api: FakeRemote,
    files_api: FakeRemote,
) -> Callable[[Settings], FastAPI]:
    """설정을 받아 외부 의존성이 대체된 앱을 생성하는 팩토리."""

    def factory(settings: Settings) -> FastAPI:
        app = create_app(settings)
        app.dependency_overrides[get_session_store] = lambda: session_store
        app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
        app.dependency_overrides[get_oauth_provider] = lambda: GoogleOAuthProvider.from_settings(
            settings, google_api.client()
        )
        app.dependency_overrides[get_drive_gateway] = lambda: GoogleDriveClient(
            drive_api.client(), fake_token_source
        )
        app.dependency_overrides[get_upstream_fetcher] = lambda: HttpxUpstreamFetcher(
            files_api.client()
        )
        return app

    return factory


@pytest.fixture
def client(make_app, settings: Settings) -> Iterator[TestClient]:
    with TestClient(make_app(settings)) as test_client:
        yield test_client
