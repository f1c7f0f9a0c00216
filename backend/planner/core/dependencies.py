# backend/planner/core/dependencies.py
"""
FastAPI providers for the planner services.

Each request builds its services from the cached settings and the shared
Firestore client; tests swap `get_db` / `get_settings` via dependency_overrides.
"""
from fastapi import Depends

from backend.planner.config import Settings, get_db, get_settings
from backend.planner.core.email_utils import verification_mailer
from backend.planner.core.security import CredentialGate, TokenService
from backend.planner.repositories.faculty_collections import FacultyCollectionRepository
from backend.planner.services.user_profiles import UserProfileService


def get_credential_gate(settings: Settings = Depends(get_settings)) -> CredentialGate:
    return CredentialGate(settings.credential)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService.from_credential(settings.credential, ttl_seconds=settings.token_ttl_seconds)


def get_faculty_repository(
    settings: Settings = Depends(get_settings),
    db=Depends(get_db),
) -> FacultyCollectionRepository:
    return FacultyCollectionRepository(db, timeout=settings.request_timeout_seconds)


def get_user_service(
    settings: Settings = Depends(get_settings),
    db=Depends(get_db),
) -> UserProfileService:
    return UserProfileService(
        db,
        timeout=settings.request_timeout_seconds,
        mailer=verification_mailer(settings),
    )
