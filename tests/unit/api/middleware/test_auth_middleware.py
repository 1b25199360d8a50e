"""
Tests para AccessTokenMiddleware.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.middleware.auth import AccessTokenMiddleware, read_authorization

ACCESS_TOKEN = "s3cr3t-access-token"


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(AccessTokenMiddleware, access_token=ACCESS_TOKEN)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/cantones/{provinceCode}")
    async def cantons(provinceCode: str):  # noqa: N803
        return [{"code": "01"}]

    return TestClient(app)


class TestAccessTokenMiddleware:
    def test_missing_header_rejected(self, client):
        response = client.get("/cantones/1")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_wrong_token_rejected(self, client):
        response = client.get("/cantones/1", headers={"Authorization": "Bearer wrong"})

        assert response.status_code == 401

    def test_raw_token_accepted(self, client):
        response = client.get("/cantones/1", headers={"Authorization": ACCESS_TOKEN})

        assert response.status_code == 200

    def test_bearer_token_accepted(self, client):
        response = client.get("/cantones/1", headers={"Authorization": f"Bearer {ACCESS_TOKEN}"})

        assert response.status_code == 200

    def test_public_path_skips_authentication(self, client):
        response = client.get("/health")

        assert response.status_code == 200

    def test_public_prefix_does_not_match_other_paths(self, client):
        response = client.get("/healthcheck")

        assert response.status_code == 401

    def test_empty_token_not_allowed(self):
        with pytest.raises(ValueError):
            AccessTokenMiddleware(FastAPI(), access_token="")


@pytest.mark.parametrize(
    "header, expected",
    [
        ("", None),
        ("   ", None),
        ("abc", "abc"),
        ("Bearer abc", "abc"),
        ("bearer  abc ", "abc"),
        ("Basic abc", "Basic abc"),
    ],
)
def test_read_authorization(header, expected):
    assert read_authorization(header) == expected
