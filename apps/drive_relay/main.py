"""Drive Relay API Application Entry Point.

Figma 플러그인용 BFF입니다.
- OAuth 릴레이: 리다이렉트를 받을 수 없는 클라이언트가 폴링으로 토큰을 수령
- Drive 파일 정보 조회/다운로드 (서비스 계정)
- 허용 호스트 파일 프록시 (20MiB 상한)
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.drive_relay.infrastructure.http import close_http_client
from apps.drive_relay.presentation.background import SweepLoop
from apps.drive_relay.presentation.http.controllers import root_router
from apps.drive_relay.presentation.http.errors import register_exception_handlers
from apps.drive_relay.presentation.http.middleware import RelayCORSMiddleware
from apps.drive_relay.setup.config import Settings, get_settings
from apps.drive_relay.setup.dependencies import close_redis_clients, get_session_store
from apps.drive_relay.setup.logging import setup_logging

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    """설정에 맞는 lifespan 생성."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            "Starting Drive Relay API",
            extra={"store_backend": settings.store_backend, "environment": settings.environment},
        )

        sweep_loop: SweepLoop | None = None
        sweep_task: asyncio.Task | None = None
        if settings.store_backend == "memory":
            sweep_loop = SweepLoop(
                get_session_store(settings),
                interval=settings.sweep_interval_seconds,
            )
            sweep_task = asyncio.create_task(sweep_loop.run())

        app.state.sweep_loop = sweep_loop

        yield

        # Shutdown
        logger.info("Shutting down Drive Relay API")
        if sweep_loop is not None and sweep_task is not None:
            sweep_loop.stop()
            sweep_task.cancel()
            try:
                await sweep_task
            except asyncio.CancelledError:
                pass
        await close_http_client()
        await close_redis_clients()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리.

    Args:
        settings: 주입할 설정 (None이면 환경변수에서 로드)
    """
    injected = settings is not None
    settings = settings or get_settings()

    # 로깅 설정
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Google OAuth 릴레이 및 Drive 파일 프록시",
        version=settings.service_version,
        lifespan=build_lifespan(settings),
    )

    if injected:
        app.dependency_overrides[get_settings] = lambda: settings

    # CORS (모든 경로의 OPTIONS 응답 포함)
    app.add_middleware(RelayCORSMiddleware, allowed_origins=settings.cors_origins)

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.drive_relay.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
