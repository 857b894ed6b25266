"""CORS, health, sweep 통합 테스트."""

from fastapi.testclient import TestClient


class TestCors:
    def test_allowed_origin_is_reflected(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "https://www.figma.com"})

        assert response.headers["access-control-allow-origin"] == "https://www.figma.com"
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "Origin" in response.headers["vary"]

    def test_missing_origin_is_null(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.headers["access-control-allow-origin"] == "null"

    def test_unknown_origin_gets_first_allowed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "https://evil.test"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_wildcard(self, make_app, settings) -> None:
        app = make_app(settings.model_copy(update={"cors_allowed_origins": "*"}))

        with TestClient(app) as client:
            response = client.get("/health", headers={"Origin": "https://any.test"})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers

    def test_preflight_on_any_path(self, client: TestClient) -> None:
        response = client.options(
            "/anything/at/all",
            headers={
                "Origin": "https://www.figma.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type, X-Plugin",
            },
        )

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "https://www.figma.com"
        assert response.headers["access-control-allow-methods"] == "POST"
        assert response.headers["access-control-allow-headers"] == "Content-Type, X-Plugin"

    def test_error_responses_carry_cors(self, client: TestClient) -> None:
        response = client.get("/info/bad", headers={"Origin": "https://www.figma.com"})

        assert response.status_code == 400
        assert response.headers["access-control-allow-origin"] == "https://www.figma.com"


class TestGeneral:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert isinstance(body["ts"], int)
        assert body["ts"] > 1_600_000_000_000

    def test_sweep_removes_expired_sessions(self, client: TestClient, clock) -> None:
        client.get("/oauth/start")
        clock.advance(601)

        first = client.get("/cron/sweep").json()
        second = client.get("/cron/sweep").json()

        assert first["ok"] is True
        assert first["swept"] == 1
        assert second["swept"] == 0
