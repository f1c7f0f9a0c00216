"""Shared fixtures: fake Firestore, services and an app wired to them."""
import base64
import os
from datetime import datetime, timedelta, timezone

# backend.planner import edilmeden önce: Settings zorunlu alanları
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "s3cret-pass")
os.environ.setdefault("TOKEN_SECRET_KEY", "test-signing-secret")
os.environ.setdefault("TOKEN_TRANSPORT", "both")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from backend.planner.config import get_db, get_settings  # noqa: E402
from backend.planner.core.dependencies import get_token_service  # noqa: E402
from backend.planner.core.security import TokenService  # noqa: E402
from backend.planner.main import app  # noqa: E402
from firestore_fakes import FakeFirestore  # noqa: E402


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def token_service(settings) -> TokenService:
    return TokenService.from_credential(settings.credential, ttl_seconds=settings.token_ttl_seconds)


@pytest.fixture
def expired_token(settings) -> str:
    """Token issued two hours ago with the real signing secret."""
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    service = TokenService.from_credential(settings.credential, clock=lambda: issued)
    return service.issue("s1").token


@pytest.fixture
def shift_clock(client, settings):
    """Sunucu saatini ileri alır: get_token_service sabit bir saatle değiştirilir."""

    def _shift(delta: timedelta) -> None:
        now = datetime.now(timezone.utc) + delta
        app.dependency_overrides[get_token_service] = lambda: TokenService.from_credential(
            settings.credential, ttl_seconds=settings.token_ttl_seconds, clock=lambda: now
        )

    return _shift


def basic_auth(username: str, password: str) -> dict:
    raw = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {raw}"}


@pytest.fixture
def admin_headers(settings) -> dict:
    return basic_auth(
        settings.admin_username.get_secret_value(),
        settings.admin_password.get_secret_value(),
    )


@pytest.fixture
def client(fake_db):
    # secure cookie'ler sadece https üzerinden geri gönderilir
    app.dependency_overrides[get_db] = lambda: fake_db
    with TestClient(app, base_url="https://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def logged_in_client(client, admin_headers):
    resp = client.post("/login", headers=admin_headers, json={"uid": "s1"})
    assert resp.status_code == 200
    return client
