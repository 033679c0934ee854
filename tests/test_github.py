"""
Tests del proxy /api/profile/github/{username} con httpx.MockTransport.
"""
import asyncio

import httpx
import pytest

from app.core.config import settings
from app.github import service as gh_svc


@pytest.fixture
def github(monkeypatch):
    """Reemplaza el cliente de GitHub; devuelve la lista de requests vistas."""
    seen: list[httpx.Request] = []
    state = {"handler": None}

    def transport_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return state["handler"](request)

    def fake_client() -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=settings.GITHUB_API_URL,
            transport=httpx.MockTransport(transport_handler),
            headers={"User-Agent": gh_svc.USER_AGENT},
        )

    monkeypatch.setattr(gh_svc, "_client", fake_client)

    def use(handler):
        state["handler"] = handler
        return seen

    return use


def test_returns_repos(client, github):
    repos = [{"name": f"repo{i}"} for i in range(5)]
    seen = github(lambda request: httpx.Response(200, json=repos))

    resp = client.get("/api/profile/github/octocat")
    assert resp.status_code == 200
    assert resp.json() == repos

    url = seen[0].url
    assert url.path == "/users/octocat/repos"
    assert url.params["per_page"] == "5"
    assert url.params["sort"] == "created"
    assert url.params["direction"] == "desc"


def test_non_200_is_not_found(client, github):
    github(lambda request: httpx.Response(404, json={"message": "Not Found", "secret": "x"}))

    resp = client.get("/api/profile/github/ghost")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "No Github profile found"}


def test_non_json_body_is_not_found(client, github):
    github(lambda request: httpx.Response(200, text="<html>oops</html>"))

    resp = client.get("/api/profile/github/octocat")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "No Github profile found"}


def test_non_list_json_is_not_found(client, github):
    github(lambda request: httpx.Response(200, json={"message": "weird"}))

    assert client.get("/api/profile/github/octocat").status_code == 404


def test_timeout_is_not_found(client, github):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    github(handler)
    resp = client.get("/api/profile/github/slow")
    assert resp.status_code == 404


def test_network_error_is_not_found(client, github):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    github(handler)
    assert client.get("/api/profile/github/down").status_code == 404


def test_real_client_uses_credentials(monkeypatch):
    monkeypatch.setattr(settings, "GITHUB_CLIENT_ID", "id")
    monkeypatch.setattr(settings, "GITHUB_CLIENT_SECRET", "secret")
    monkeypatch.setattr(settings, "GITHUB_TIMEOUT_SECONDS", 2.5)

    async def check():
        async with gh_svc._client() as client:
            assert isinstance(client.auth, httpx.BasicAuth)
            assert client.timeout.read == 2.5
            assert client.headers["User-Agent"] == gh_svc.USER_AGENT

    asyncio.run(check())
