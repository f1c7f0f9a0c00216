"""
# `backend/planner/routers/users.py` - User profile endpoints

Every endpoint acts on the profile of the token's own uid; a session can
never read or change another identity.

### `POST /users/save`
Creates `users/{uid}` with role `Student` if missing. `result.existed` tells
whether it was already there (not reliable under concurrent first calls).

### `GET /users/me`
Returns the profile, `404` if it was never saved.

### `PATCH /users/me`
JSON object of fields to change. Only allow-listed fields are written; `uid`,
`role` and unknown keys are dropped without error. Roles change only through
`python -m backend.promote_admin`.

### `DELETE /users/me`
Hard delete, `404` if missing.

### `POST /users/me/verify`
Body `{"email": "..."}`. `404` if the profile is missing, `400` if the address
is malformed; sends a verification mail when SMTP is configured.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from backend.planner.core.auth import get_subject_id
from backend.planner.core.constants import SELF_SERVICE_KEYS
from backend.planner.core.dependencies import get_user_service
from backend.planner.core.errors import PlannerError
from backend.planner.routers.common import http_error
from backend.planner.schemas.user import SaveUserResult, VerifyEmailRequest
from backend.planner.services.user_profiles import UserProfileService

logger = logging.getLogger("planner.users")

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/save")
async def save_user(
    uid: str = Depends(get_subject_id),
    users: UserProfileService = Depends(get_user_service),
):
    try:
        existed = await users.save_user(uid)
    except PlannerError as exc:
        raise http_error(exc, "Failed to save user") from exc
    return {"result": SaveUserResult(existed=existed).model_dump()}


@router.get("/me")
async def get_my_profile(
    uid: str = Depends(get_subject_id),
    users: UserProfileService = Depends(get_user_service),
):
    try:
        profile = await users.get_user_by_id(uid)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find user") from exc
    return {"result": profile.model_dump()}


@router.patch("/me")
async def update_my_profile(
    updates: Dict[str, Any] = Body(...),
    uid: str = Depends(get_subject_id),
    users: UserProfileService = Depends(get_user_service),
):
    try:
        await users.update_user(uid, updates, allowed=SELF_SERVICE_KEYS)
    except PlannerError as exc:
        raise http_error(exc, "Failed to update user") from exc
    return {"result": f"User document with ID: {uid} updated successfully."}


@router.delete("/me")
async def delete_my_profile(
    uid: str = Depends(get_subject_id),
    users: UserProfileService = Depends(get_user_service),
):
    try:
        await users.delete_user(uid)
    except PlannerError as exc:
        raise http_error(exc, "Failed to delete user") from exc
    return {"result": "User deleted successfully"}


@router.post("/me/verify")
async def verify_my_email(
    payload: VerifyEmailRequest,
    uid: str = Depends(get_subject_id),
    users: UserProfileService = Depends(get_user_service),
):
    try:
        verified = await users.verify_user(uid, payload.email)
    except PlannerError as exc:
        raise http_error(exc, "Failed to verify user") from exc
    return {"result": verified}
