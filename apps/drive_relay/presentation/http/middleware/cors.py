"""CORS Middleware.

허용 목록 기반 Origin 반사와 모든 경로의 OPTIONS preflight 응답을 담당합니다.

Origin 결정 규칙:
    1. 요청 Origin (없으면 literal "null")이 허용 목록에 있으면 그대로 반사 + credentials
    2. 허용 목록에 "*"가 있으면 "*" (credentials 없음)
    3. 그 외에는 허용 목록의 첫 번째 항목
"""

from __future__ import annotations

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

NULL_ORIGIN = "null"
WILDCARD = "*"
DEFAULT_ALLOW_HEADERS = "Content-Type, Authorization"
DEFAULT_ALLOW_METHODS = "GET, POST, OPTIONS"


def resolve_allow_origin(origin: str | None, allowed_origins: list[str]) -> tuple[str, bool]:
    """(Access-Control-Allow-Origin 값, credentials 허용 여부) 반환."""
    candidate = origin or NULL_ORIGIN

    if candidate in allowed_origins:
        return candidate, True
    if WILDCARD in allowed_origins:
        return WILDCARD, False
    if allowed_origins:
        return allowed_origins[0], True
    return WILDCARD, False


def build_cors_headers(request_headers: Headers, allowed_origins: list[str]) -> dict[str, str]:
    """요청 헤더로부터 CORS 응답 헤더를 구성합니다."""
    allow_origin, allow_credentials = resolve_allow_origin(
        request_headers.get("origin"), allowed_origins
    )

    headers = {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": (
            request_headers.get("access-control-request-headers") or DEFAULT_ALLOW_HEADERS
        ),
        "Access-Control-Allow-Methods": (
            request_headers.get("access-control-request-method") or DEFAULT_ALLOW_METHODS
        ),
        "Vary": "Origin",
    }
    if allow_credentials:
        headers["Access-Control-Allow-Credentials"] = "true"
    return headers


class RelayCORSMiddleware:
    """순수 ASGI CORS 미들웨어.

    예외 핸들러가 만든 오류 응답에도 CORS 헤더가 붙습니다.
    """

    def __init__(self, app: ASGIApp, allowed_origins: list[str]) -> None:
        self.app = app
        self.allowed_origins = list(allowed_origins)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cors_headers = build_cors_headers(Headers(scope=scope), self.allowed_origins)

        if scope["method"] == "OPTIONS":
            response = Response(status_code=204, headers=cors_headers)
            await response(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                for key, value in cors_headers.items():
                    if key == "Vary":
                        headers.add_vary_header(value)
                    else:
                        headers[key] = value
            await send(message)

        await self.app(scope, receive, send_wrapper)
