"""Test fixtures: in-memory MongoDB and test-secret ID tokens.

Learn: Testing pattern for motor + FastAPI:

1. Each test gets a fresh mongomock_motor client, so there is no
   cross-test pollution and no MongoDB server is needed.
2. httpx's ASGITransport does not run the lifespan, so fixtures put the
   store and the identity verifier straight onto app.state, which is the same
   place the lifespan and create_app() would.
3. The verifier is a real JWTIdentityVerifier with a test secret, so
   auth tests exercise genuine signature and expiry checks.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from smartdeals.auth.verifier import JWTIdentityVerifier, create_id_token
from smartdeals.config import Settings
from smartdeals.db.store import Store
from smartdeals.main import create_app

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"
TEST_ISSUER = "https://securetoken.example.com/smart-deals-test"
TEST_AUDIENCE = "smart-deals-test"


def auth_settings(**overrides) -> Settings:
    values = {
        "auth_secret": TEST_SECRET,
        "auth_issuer": TEST_ISSUER,
        "auth_audience": TEST_AUDIENCE,
    }
    values.update(overrides)
    return Settings(**values)


def make_token(email: str, **kwargs) -> str:
    return create_id_token(email, auth_settings(), **kwargs)


def bearer(email: str) -> dict:
    return {"Authorization": f"Bearer {make_token(email)}"}


@pytest_asyncio.fixture()
async def store():
    """Per-test in-memory store."""
    return Store(client=AsyncMongoMockClient(), database_name="SimpleDealsTest")


@pytest_asyncio.fixture()
async def app(store):
    application = create_app()
    application.state.store = store
    application.state.verifier = JWTIdentityVerifier(
        secret=TEST_SECRET, issuer=TEST_ISSUER, audience=TEST_AUDIENCE
    )
    return application


@pytest_asyncio.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
