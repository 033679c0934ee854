import asyncio
import os
from collections.abc import Callable, Iterator

# antes de importar app: sqlite en memoria para el engine global
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.db.session import get_session  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def client(tmp_path) -> Iterator[TestClient]:
    """TestClient con una DB sqlite nueva por test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def create_all():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_all())
    TestingSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_session():
        async with TestingSessionLocal() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def register(client) -> Callable[..., dict]:
    """Registra un usuario y devuelve headers de auth listos para usar."""
    counter = {"n": 0}

    def _register(name: str = "Tester", email: str | None = None) -> dict:
        counter["n"] += 1
        email = email or f"tester{counter['n']}@example.com"
        resp = client.post(
            "/api/users/register/",
            json={"name": name, "email": email, "password": "secret123"},
        )
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _register


@pytest.fixture
def auth(register) -> dict:
    return register()


PROFILE = {
    "status": "Developer",
    "skills": "js, node ,go",
    "company": "Acme",
    "website": "https://acme.dev",
    "location": "Remote",
    "bio": "Hi",
    "githubusername": "octocat",
}


@pytest.fixture
def profile_payload() -> dict:
    return dict(PROFILE)


@pytest.fixture
def with_profile(client, auth, profile_payload) -> dict:
    resp = client.post("/api/profile/", json=profile_payload, headers=auth)
    assert resp.status_code == 200, resp.text
    return auth
