"""
# `backend/planner/services/user_profiles.py` - User profile service

Profiles live at `users/{uid}`. This service is the only writer.

Every method takes an optional `timeout`; one deadline bounds the whole
operation (read, write and, for `verify_user`, the mail), not each round-trip.

- `save_user(uid)`        → idempotent create, returns True when the profile already existed
- `get_user_by_id(uid)`   → `NotFound` if missing
- `update_user(uid, ...)` → allow-listed partial merge (`allowed` narrows it), other keys are dropped silently
- `delete_user(uid)`      → hard delete, `NotFound` if missing
- `verify_user(uid, email)` → existence first, then email format; optional mailer

> **Note:** `save_user` is check-then-write, not a transaction. Two first-time
> calls for the same uid can both see "absent" and both write the same default
> document; only the returned `existed` flag is unreliable in that race.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from backend.planner.core.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_ROLE,
    USER_ALLOWED_KEYS,
    USERS_COLLECTION,
)
from backend.planner.core.deadline import run_with_deadline
from backend.planner.core.errors import InvalidInput, NotFound
from backend.planner.schemas.user import UserProfile

logger = logging.getLogger("planner.users")

VerificationMailer = Callable[[str, str], Awaitable[None]]

_EMAIL = TypeAdapter(EmailStr)


def filter_allowed_keys(updates: Mapping[str, Any], allowed=USER_ALLOWED_KEYS) -> Dict[str, Any]:
    return {k: v for k, v in (updates or {}).items() if k in allowed}


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str) or not email:
        return False
    try:
        _EMAIL.validate_python(email)
    except ValidationError:
        return False
    return True


class UserProfileService:
    def __init__(
        self,
        db,
        timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        mailer: Optional[VerificationMailer] = None,
    ):
        self._db = db
        self._timeout = timeout
        self._mailer = mailer

    def _deadline(self, timeout: Optional[float]) -> Optional[float]:
        return self._timeout if timeout is None else timeout

    def _ref(self, uid: str):
        if not isinstance(uid, str) or not uid.strip() or "/" in uid:
            raise InvalidInput("Invalid user id")
        return self._db.collection(USERS_COLLECTION).document(uid)

    async def _get_existing(self, uid: str):
        ref = self._ref(uid)
        snap = await ref.get()
        if not snap.exists:
            raise NotFound(f"No user found with ID: {uid}")
        return ref, snap

    async def save_user(self, uid: str, timeout: Optional[float] = None) -> bool:
        ref = self._ref(uid)

        async def _save() -> bool:
            snap = await ref.get()
            if snap.exists:
                return True
            await ref.set({"uid": uid, "role": DEFAULT_ROLE})
            return False

        existed = await run_with_deadline(_save(), self._deadline(timeout), operation="save user")
        if not existed:
            logger.info("User document with ID: %s created", uid)
        return existed

    async def get_user_by_id(self, uid: str, timeout: Optional[float] = None) -> UserProfile:
        _, snap = await run_with_deadline(
            self._get_existing(uid),
            self._deadline(timeout),
            operation="get user",
        )
        data = snap.to_dict() or {}
        data["uid"] = uid
        return UserProfile(**data)

    async def update_user(
        self,
        uid: str,
        updates: Mapping[str, Any],
        timeout: Optional[float] = None,
        allowed=USER_ALLOWED_KEYS,
    ) -> None:
        filtered = filter_allowed_keys(updates, allowed)

        async def _update() -> None:
            ref, _ = await self._get_existing(uid)
            if filtered:
                await ref.update(filtered)

        await run_with_deadline(_update(), self._deadline(timeout), operation="update user")
        if filtered:
            logger.info("User document with ID: %s updated successfully.", uid)
        else:
            logger.info("Nothing to update for user %s", uid)

    async def delete_user(self, uid: str, timeout: Optional[float] = None) -> None:
        async def _delete() -> None:
            ref, _ = await self._get_existing(uid)
            await ref.delete()

        await run_with_deadline(_delete(), self._deadline(timeout), operation="delete user")
        logger.info("User with ID: %s deleted successfully.", uid)

    async def verify_user(self, uid: str, email: str, timeout: Optional[float] = None) -> bool:
        async def _verify() -> bool:
            await self._get_existing(uid)

            if not is_valid_email(email):
                raise InvalidInput("Invalid email address")

            if self._mailer is not None:
                await self._mailer(uid, email)
            return True

        return await run_with_deadline(_verify(), self._deadline(timeout), operation="verify user")
