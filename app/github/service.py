# app/github/service.py
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.core.config import settings

log = logging.getLogger("uvicorn")

USER_AGENT = "devconnector-api"


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.GITHUB_API_URL,
        timeout=settings.GITHUB_TIMEOUT_SECONDS,
        auth=settings.github_auth,
        headers={
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github+json",
        },
    )


async def fetch_recent_repos(username: str) -> list[dict[str, Any]] | None:
    """
    Últimos repos creados del usuario en GitHub (máx. GITHUB_REPOS_LIMIT).

    Devuelve None si GitHub no responde 200, si se pasa el timeout o si hay
    cualquier error de red: para el cliente todo eso es "no encontrado".
    """
    params = {
        "per_page": settings.GITHUB_REPOS_LIMIT,
        "sort": "created",
        "direction": "desc",
    }
    try:
        async with _client() as client:
            resp = await client.get(f"/users/{quote(username, safe='')}/repos", params=params)
    except httpx.TimeoutException:
        log.warning(f"⏱️ GitHub timeout para {username!r}")
        return None
    except httpx.HTTPError as e:
        log.warning(f"GitHub request falló para {username!r}: {e!r}")
        return None

    if resp.status_code != 200:
        log.warning(f"GitHub respondió {resp.status_code} para {username!r}: {resp.text[:200]}")
        return None

    try:
        data = resp.json()
    except ValueError as e:
        log.warning(f"GitHub devolvió un body no JSON para {username!r}: {e!r}")
        return None
    if not isinstance(data, list):
        log.warning(f"GitHub devolvió {type(data).__name__} en vez de lista para {username!r}")
        return None
    return data[: settings.GITHUB_REPOS_LIMIT]
