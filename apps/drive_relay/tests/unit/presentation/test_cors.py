"""CORS Origin 결정 단위 테스트."""

import pytest
from starlette.datastructures import Headers

from apps.drive_relay.presentation.http.middleware.cors import (
    build_cors_headers,
    resolve_allow_origin,
)

ALLOWED = ["https://www.figma.com", "http://localhost:3000", "null"]


class TestResolveAllowOrigin:
    def test_allowed_origin_is_reflected(self) -> None:
        assert resolve_allow_origin("http://localhost:3000", ALLOWED) == (
            "http://localhost:3000",
            True,
        )

    @pytest.mark.parametrize("origin", [None, ""])
    def test_missing_origin_is_null(self, origin) -> None:
        """Figma 플러그인 iframe은 Origin: null."""
        assert resolve_allow_origin(origin, ALLOWED) == ("null", True)

    def test_unknown_origin_falls_back_to_first(self) -> None:
        assert resolve_allow_origin("https://evil.example", ALLOWED) == (
            "https://www.figma.com",
            True,
        )

    def test_wildcard_without_credentials(self) -> None:
        assert resolve_allow_origin("https://any.example", ["https://a.example", "*"]) == (
            "*",
            False,
        )


class TestBuildCorsHeaders:
    def test_preflight_request_headers_are_reflected(self) -> None:
        headers = build_cors_headers(
            Headers(
                {
                    "origin": "https://www.figma.com",
                    "access-control-request-headers": "X-Custom",
                    "access-control-request-method": "PUT",
                }
            ),
            ALLOWED,
        )

        assert headers["Access-Control-Allow-Origin"] == "https://www.figma.com"
        assert headers["Access-Control-Allow-Headers"] == "X-Custom"
        assert headers["Access-Control-Allow-Methods"] == "PUT"
        assert headers["Access-Control-Allow-Credentials"] == "true"
        assert headers["Vary"] == "Origin"

    def test_defaults_and_no_credentials_for_wildcard(self) -> None:
        headers = build_cors_headers(Headers({}), ["*"])

        assert headers["Access-Control-Allow-Origin"] == "*"
        assert headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
        assert headers["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
        assert "Access-Control-Allow-Credentials" not in headers
