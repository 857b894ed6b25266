"""SessionStore Port.

진행 중인 인증 세션과 교환 결과를 보관하는 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol

from apps.drive_relay.domain.entities import AuthSession, OAuthResult


class SessionStore(Protocol):
    """세션/결과 저장소 인터페이스.

    세션과 결과는 같은 session_id로 주소 지정되지만 네임스페이스는 분리됩니다.
    백엔드(프로세스 메모리, Redis)와 무관하게 계약은 동일합니다.

    구현체:
        - InMemorySessionStore (infrastructure/persistence_memory/)
        - RedisSessionStore (infrastructure/persistence_redis/)
    """

    async def save_session(
        self, session_id: str, session: AuthSession, ttl_seconds: int = 600
    ) -> None:
        """세션 저장 (upsert, TTL 갱신)."""
        ...

    async def get_session(self, session_id: str) -> AuthSession | None:
        """세션 조회.

        Returns:
            세션 또는 None (없거나 TTL 경과)
        """
        ...

    async def delete_session(self, session_id: str) -> None:
        """세션 삭제 (멱등)."""
        ...

    async def save_result(
        self, session_id: str, result: OAuthResult, ttl_seconds: int = 600
    ) -> None:
        """결과 저장 (upsert, TTL 갱신)."""
        ...

    async def has_result(self, session_id: str) -> bool:
        """결과 존재 여부 (소비하지 않음)."""
        ...

    async def take_result(self, session_id: str) -> OAuthResult | None:
        """결과 조회 및 삭제 (원자적).

        동시에 호출한 두 요청 중 하나만 결과를 받습니다.
        """
        ...

    async def sweep(self) -> int:
        """만료 항목 정리.

        Returns:
            삭제된 항목 수
        """
        ...
