import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

TEST_SECRET = "test-secret-that-is-long-enough-for-hs256"

# Settings are built at import time and refuse to start without a secret
os.environ.setdefault("JWT_SECRET", TEST_SECRET)

from devconnect.config.settings import Settings, get_settings  # noqa: E402
from devconnect.database.supabase_client import get_supabase  # noqa: E402
from devconnect.main import app  # noqa: E402
from fake_supabase import FakeSupabase  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        github_token="gh-test-token",
    )


@pytest.fixture
def db():
    return FakeSupabase()


@pytest_asyncio.fixture
async def client(settings, db):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_supabase] = lambda: db
    app.state.limiter.enabled = False
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    async def _register(name="Jane Doe", email="jane@example.com", password="secret123"):
        r = await client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert r.status_code == 200, r.text
        return r.json()["token"]
    return _register


@pytest_asyncio.fixture
async def token(register_user):
    return await register_user()


@pytest.fixture
def auth_headers(token):
    return {"x-auth-token": token}
