"""Settings and lazy Firestore initialization."""
import pytest
from google.auth.exceptions import DefaultCredentialsError

from backend.planner import config
from backend.planner.config import get_db
from backend.planner.core.errors import Unavailable
from backend.planner.main import app


@pytest.fixture
def fresh_db_slot(monkeypatch):
    monkeypatch.setattr(config, "_db_instance", None)


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("firebase_service_account.json"),
        ValueError("Invalid service account certificate"),
        DefaultCredentialsError("no credentials"),
    ],
)
def test_firebase_init_failure_is_unavailable(fresh_db_slot, monkeypatch, error):
    def broken_init(settings):
        raise error

    monkeypatch.setattr(config, "init_firebase", broken_init)

    with pytest.raises(Unavailable):
        get_db()
    assert config._db_instance is None


def test_client_is_created_once(fresh_db_slot, monkeypatch):
    created = []

    monkeypatch.setattr(config, "init_firebase", lambda settings: "app")
    monkeypatch.setattr(config.firestore_async, "client", lambda app: created.append(app) or object())

    assert get_db() is get_db()
    assert created == ["app"]


def test_store_init_failure_reaches_client_as_500(client, admin_headers):
    def unavailable_db():
        raise Unavailable()

    client.post("/login", headers=admin_headers, json={"uid": "s1"})
    app.dependency_overrides[get_db] = unavailable_db

    resp = client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to reach document store: Document store unavailable"}


def test_origins_parsing(settings):
    assert settings.model_copy(update={"allowed_origins": "*"}).origins == ["*"]
    assert settings.model_copy(update={"allowed_origins": "https://a.si, https://b.si,"}).origins == [
        "https://a.si",
        "https://b.si",
    ]


def test_secrets_are_masked(settings):
    assert settings.admin_password.get_secret_value() not in repr(settings)
    assert settings.token_secret_key.get_secret_value() not in repr(settings)
