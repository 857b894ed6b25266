"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 형식: {"error": <message>, "code": <CODE>} (+ details / status)
"""

import logging
import math
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.drive_relay.application.common.exceptions import (
    ApplicationError,
    RateLimitExceededError,
    UpstreamError,
)
from apps.drive_relay.application.oauth.exceptions import TokenExchangeError, TokenRefreshError
from apps.drive_relay.domain.exceptions import DomainError
from apps.drive_relay.presentation.http.errors.translators import translate_error

logger = logging.getLogger(__name__)


def error_response(exc: DomainError | ApplicationError) -> JSONResponse:
    status_code, code = translate_error(exc)
    return JSONResponse(status_code=status_code, content={"error": exc.message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(TokenExchangeError)
    @app.exception_handler(TokenRefreshError)
    async def token_error_handler(
        request: Request, exc: TokenExchangeError | TokenRefreshError
    ):
        status_code, code = translate_error(exc)
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.message, "code": code, "details": exc.details},
        )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        content = {"error": exc.message, "code": "UPSTREAM_ERROR"}
        if exc.status_code is not None:
            content["status"] = exc.status_code
        return JSONResponse(status_code=502, content=content)

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_handler(request: Request, exc: RateLimitExceededError):
        retry_after = max(0, math.ceil(exc.reset_at - time.time()))
        return JSONResponse(
            status_code=429,
            content={"error": exc.message, "code": "RATE_LIMITED"},
            headers={"Retry-After": str(retry_after)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "code": "INVALID_REQUEST"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return error_response(exc)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        response = error_response(exc)
        if response.status_code >= 500:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error_type": type(exc).__name__},
            )
        return response
