"""
backend/planner/config.py - Application configuration and Firebase initialization.

This module defines a Pydantic BaseSettings class to load configuration from the
environment and lazily initializes the Firebase Admin SDK (async Firestore client).
Settings are frozen once loaded; the admin credential and the token signing secret
are handed to the services explicitly instead of being read from globals.
"""
import logging
from functools import lru_cache
from typing import Literal, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.auth.exceptions import GoogleAuthError
from pydantic import BaseModel, ConfigDict, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.planner.core.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    TOKEN_TTL_SECONDS,
)
from backend.planner.core.errors import Unavailable

logger = logging.getLogger("planner.store")


class Credential(BaseModel):
    """Shared administrative operator credential plus the token signing secret."""

    model_config = ConfigDict(frozen=True)

    username: SecretStr
    password: SecretStr
    secret_key: SecretStr


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Admin credential (tek ortak operatör hesabı)
    admin_username: SecretStr
    admin_password: SecretStr
    token_secret_key: SecretStr
    token_ttl_seconds: int = TOKEN_TTL_SECONDS
    token_transport: Literal["cookie", "header", "both"] = "both"
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    firebase_cred_file: str = "firebase_service_account.json"
    firebase_project_id: Optional[str] = None

    # Firebase credentials from environment variables (for Cloud Run)
    firebase_private_key_id: Optional[str] = None
    firebase_private_key: Optional[str] = None
    firebase_client_email: Optional[str] = None
    firebase_client_id: Optional[str] = None
    firebase_auth_uri: Optional[str] = None
    firebase_token_uri: Optional[str] = None
    firebase_auth_provider_x509_cert_url: Optional[str] = None
    firebase_client_x509_cert_url: Optional[str] = None

    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: str = "*"  # Comma-separated list or '*' for all

    # Doğrulama e-postası (opsiyonel; user/password yoksa gönderilmez)
    smtp_host: str = "localhost"
    smtp_port: int = 465
    smtp_user: Optional[str] = None
    smtp_password: Optional[SecretStr] = None
    smtp_from: Optional[str] = None
    smtp_use_starttls: bool = False  # 587 için true

    @property
    def credential(self) -> Credential:
        return Credential(
            username=self.admin_username,
            password=self.admin_password,
            secret_key=self.token_secret_key,
        )

    @property
    def mailer_enabled(self) -> bool:
        return bool(self.smtp_user and self.smtp_password)

    @property
    def origins(self) -> list[str]:
        if not self.allowed_origins or self.allowed_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


def _service_account(settings: Settings) -> credentials.Certificate:
    # Check if we have environment variables for Firebase credentials (Cloud Run)
    if all([
        settings.firebase_private_key_id,
        settings.firebase_private_key,
        settings.firebase_client_email,
        settings.firebase_client_id,
        settings.firebase_auth_uri,
        settings.firebase_token_uri,
        settings.firebase_auth_provider_x509_cert_url,
        settings.firebase_client_x509_cert_url,
    ]):
        cred_dict = {
            "type": "service_account",
            "project_id": settings.firebase_project_id,
            "private_key_id": settings.firebase_private_key_id,
            # .env içinde "\n" kaçışlı gelir
            "private_key": settings.firebase_private_key.replace("\\n", "\n"),
            "client_email": settings.firebase_client_email,
            "client_id": settings.firebase_client_id,
            "auth_uri": settings.firebase_auth_uri,
            "token_uri": settings.firebase_token_uri,
            "auth_provider_x509_cert_url": settings.firebase_auth_provider_x509_cert_url,
            "client_x509_cert_url": settings.firebase_client_x509_cert_url,
        }
        return credentials.Certificate(cred_dict)
    # Use service account file (local development)
    return credentials.Certificate(settings.firebase_cred_file)


def init_firebase(settings: Settings) -> firebase_admin.App:
    """Initialize the default Firebase app, or return it if it already exists."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    return firebase_admin.initialize_app(_service_account(settings), options)


_db_instance = None


def get_db():
    """Return the process-wide async Firestore client, initializing Firebase on first use.

    Missing/invalid service account, unknown project or failed auth surface as
    `Unavailable` like any other store failure.
    """
    global _db_instance
    if _db_instance is None:
        try:
            app = init_firebase(get_settings())
            _db_instance = firestore_async.client(app)
        except (ValueError, OSError, GoogleAuthError) as exc:
            logger.exception("Firestore client could not be initialized")
            raise Unavailable() from exc
    return _db_instance
