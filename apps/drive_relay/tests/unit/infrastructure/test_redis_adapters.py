"""Redis Adapters 단위 테스트.

Redis 클라이언트를 Mock하여 어댑터 로직을 테스트합니다.
"""

import json
from unittest.mock import AsyncMock

import pytest

from apps.drive_relay.domain.entities import AuthSession, OAuthResult
from apps.drive_relay.infrastructure.persistence_redis import RedisRateLimiter, RedisSessionStore
from apps.drive_relay.infrastructure.persistence_redis.constants import (
    RESULT_KEY_PREFIX,
    SESSION_KEY_PREFIX,
)

SESSION_ID = "c" * 32


class TestRedisSessionStore:
    """RedisSessionStore 테스트."""

    @pytest.fixture
    def mock_redis(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def store(self, mock_redis: AsyncMock) -> RedisSessionStore:
        return RedisSessionStore(redis=mock_redis)

    @pytest.mark.asyncio
    async def test_save_session(
        self, store: RedisSessionStore, mock_redis: AsyncMock, auth_session: AuthSession
    ) -> None:
        # Act
        await store.save_session(SESSION_ID, auth_session, ttl_seconds=600)

        # Assert
        key, ttl, value = mock_redis.setex.call_args[0]
        assert key == f"{SESSION_KEY_PREFIX}{SESSION_ID}"
        assert ttl == 600
        saved = json.loads(value)
        assert saved["state"] == auth_session.state
        assert saved["code_verifier"] == auth_session.code_verifier
        assert saved["redirect_to"] == "figma://plugin"

    @pytest.mark.asyncio
    async def test_get_session(
        self, store: RedisSessionStore, mock_redis: AsyncMock, auth_session: AuthSession
    ) -> None:
        mock_redis.get.return_value = json.dumps(auth_session.to_dict())

        assert await store.get_session(SESSION_ID) == auth_session
        mock_redis.get.assert_awaited_once_with(f"{SESSION_KEY_PREFIX}{SESSION_ID}")

    @pytest.mark.asyncio
    async def test_get_missing_session(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.get.return_value = None

        assert await store.get_session(SESSION_ID) is None

    @pytest.mark.asyncio
    async def test_delete_session(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        await store.delete_session(SESSION_ID)

        mock_redis.delete.assert_awaited_once_with(f"{SESSION_KEY_PREFIX}{SESSION_ID}")

    @pytest.mark.asyncio
    async def test_save_result_uses_result_namespace(
        self, store: RedisSessionStore, mock_redis: AsyncMock, oauth_result: OAuthResult
    ) -> None:
        await store.save_result(SESSION_ID, oauth_result, ttl_seconds=300)

        key, ttl, value = mock_redis.setex.call_args[0]
        assert key == f"{RESULT_KEY_PREFIX}{SESSION_ID}"
        assert ttl == 300
        assert json.loads(value)["tokens"] == oauth_result.tokens

    @pytest.mark.asyncio
    async def test_has_result(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.exists.return_value = 1

        assert await store.has_result(SESSION_ID) is True
        mock_redis.exists.assert_awaited_once_with(f"{RESULT_KEY_PREFIX}{SESSION_ID}")

    @pytest.mark.asyncio
    async def test_take_result_uses_getdel(
        self, store: RedisSessionStore, mock_redis: AsyncMock, oauth_result: OAuthResult
    ) -> None:
        """단일 GETDEL 명령으로 조회+삭제."""
        mock_redis.getdel.return_value = json.dumps(oauth_result.to_dict())

        assert await store.take_result(SESSION_ID) == oauth_result
        mock_redis.getdel.assert_awaited_once_with(f"{RESULT_KEY_PREFIX}{SESSION_ID}")
        mock_redis.get.assert_not_called()
        mock_redis.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_take_missing_result(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        mock_redis.getdel.return_value = None

        assert await store.take_result(SESSION_ID) is None

    @pytest.mark.asyncio
    async def test_sweep_is_noop(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        assert await store.sweep() == 0
        assert mock_redis.mock_calls == []


class TestRedisRateLimiter:
    """RedisRateLimiter 테스트."""

    @pytest.mark.asyncio
    async def test_allowed(self) -> None:
        redis = AsyncMock()
        redis.eval.return_value = [1, 3, 42]

        status = await RedisRateLimiter(redis).hit("rate_limit:info:1.2.3.4", 30, 60)

        assert status.is_allowed is True
        assert status.remaining == 27
        args = redis.eval.call_args[0]
        assert args[1:] == (1, "rate_limit:info:1.2.3.4", 30, 60)

    @pytest.mark.asyncio
    async def test_denied(self) -> None:
        redis = AsyncMock()
        redis.eval.return_value = [0, 10, 15]

        status = await RedisRateLimiter(redis).hit("rate_limit:download:1.2.3.4", 10, 60)

        assert status.is_allowed is False
        assert status.remaining == 0
