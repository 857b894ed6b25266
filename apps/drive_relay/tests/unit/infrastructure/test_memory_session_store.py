"""InMemorySessionStore 단위 테스트."""

import asyncio

import pytest

from apps.drive_relay.domain.entities import AuthSession
from apps.drive_relay.infrastructure.persistence_memory import InMemorySessionStore

SESSION_ID = "d" * 32


class TestInMemorySessionStore:
    """InMemorySessionStore 테스트."""

    @pytest.mark.asyncio
    async def test_absent_ids(self, session_store: InMemorySessionStore) -> None:
        """없는 ID는 None/False, 삭제는 멱등."""
        assert await session_store.get_session("missing") is None
        assert await session_store.has_result("missing") is False
        assert await session_store.take_result("missing") is None
        await session_store.delete_session("missing")

    @pytest.mark.asyncio
    async def test_session_crud(self, session_store: InMemorySessionStore, auth_session) -> None:
        await session_store.save_session(SESSION_ID, auth_session)
        assert await session_store.get_session(SESSION_ID) == auth_session

        await session_store.delete_session(SESSION_ID)
        assert await session_store.get_session(SESSION_ID) is None

    @pytest.mark.asyncio
    async def test_sessions_and_results_are_separate(
        self, session_store: InMemorySessionStore, auth_session, oauth_result
    ) -> None:
        await session_store.save_session(SESSION_ID, auth_session)

        assert await session_store.has_result(SESSION_ID) is False

        await session_store.save_result(SESSION_ID, oauth_result)
        await session_store.delete_session(SESSION_ID)

        assert await session_store.has_result(SESSION_ID) is True

    @pytest.mark.asyncio
    async def test_take_then_take(self, session_store: InMemorySessionStore, oauth_result) -> None:
        await session_store.save_result(SESSION_ID, oauth_result)

        assert await session_store.has_result(SESSION_ID) is True
        assert await session_store.take_result(SESSION_ID) == oauth_result
        assert await session_store.take_result(SESSION_ID) is None
        assert await session_store.has_result(SESSION_ID) is False

    @pytest.mark.asyncio
    async def test_concurrent_take_has_single_winner(
        self, session_store: InMemorySessionStore, oauth_result
    ) -> None:
        await session_store.save_result(SESSION_ID, oauth_result)

        results = await asyncio.gather(
            *(session_store.take_result(SESSION_ID) for _ in range(5))
        )

        assert [r for r in results if r is not None] == [oauth_result]

    @pytest.mark.asyncio
    async def test_logical_ttl_before_sweep(
        self, session_store: InMemorySessionStore, auth_session, oauth_result, clock
    ) -> None:
        """TTL이 지나면 sweep 전에도 보이지 않음."""
        await session_store.save_session(SESSION_ID, auth_session, ttl_seconds=600)
        await session_store.save_result(SESSION_ID, oauth_result, ttl_seconds=600)

        clock.advance(599)
        assert await session_store.get_session(SESSION_ID) is not None
        assert await session_store.has_result(SESSION_ID) is True

        clock.advance(2)
        assert await session_store.get_session(SESSION_ID) is None
        assert await session_store.has_result(SESSION_ID) is False
        assert await session_store.take_result(SESSION_ID) is None

    @pytest.mark.asyncio
    async def test_save_refreshes_ttl(
        self, session_store: InMemorySessionStore, auth_session, clock
    ) -> None:
        await session_store.save_session(SESSION_ID, auth_session, ttl_seconds=600)
        clock.advance(500)
        await session_store.save_session(SESSION_ID, auth_session, ttl_seconds=600)
        clock.advance(500)

        assert await session_store.get_session(SESSION_ID) is not None

    @pytest.mark.asyncio
    async def test_sweep_removes_only_expired(
        self, session_store: InMemorySessionStore, auth_session, oauth_result, clock
    ) -> None:
        await session_store.save_session("old-session", auth_session, ttl_seconds=600)
        await session_store.save_result("old-result", oauth_result, ttl_seconds=600)
        clock.advance(601)
        await session_store.save_session("fresh", auth_session, ttl_seconds=600)

        removed = await session_store.sweep()

        assert removed == 2
        assert await session_store.get_session("fresh") is not None
        assert await session_store.sweep() == 0

    @pytest.mark.asyncio
    async def test_expiry_counts_from_save_not_created_at(
        self, session_store: InMemorySessionStore, clock
    ) -> None:
        """만료 시각은 저장 시점 + TTL로 정해짐 (created_at과 무관)."""
        stale = AuthSession(state="s", code_verifier="v", created_at=clock() - 10_000)

        await session_store.save_session(SESSION_ID, stale, ttl_seconds=600)
        assert await session_store.get_session(SESSION_ID) == stale

        clock.advance(600)
        assert await session_store.get_session(SESSION_ID) is None
