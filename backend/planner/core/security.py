"""
# `backend/planner/core/security.py` - Credential gate & session tokens

## CredentialGate
Single shared operator credential (ADMIN_USERNAME / ADMIN_PASSWORD).
`authenticate(username, password)` compares both fields in constant time and
never says which one was wrong; the caller turns `False` into 401.

## TokenService
- `issue(subject_id)` → HS256 JWT, `sub=subject_id`, `exp = now + TTL` (1 hour).
- `verify(token)` → `subject_id` (expired once `now >= exp`, on the service clock)
  - signature ok but expired → `TokenExpired`
  - missing / malformed / bad signature / no `sub` → `Unauthorized`

The signature is checked before the expiry, so a tampered expired token is
`Unauthorized`, not `TokenExpired`. There is no revocation: a token lives
until its natural expiry.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from backend.planner.config import Credential
from backend.planner.core.constants import TOKEN_ALGORITHM, TOKEN_TTL_SECONDS
from backend.planner.core.crypto import constant_time_equals
from backend.planner.core.errors import InvalidInput, TokenExpired, Unauthorized
from backend.planner.schemas.auth import SessionToken

logger = logging.getLogger("planner.auth")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CredentialGate:
    def __init__(self, credential: Credential):
        self._credential = credential

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        if username is None or password is None:
            return False
        # İki alan da her zaman karşılaştırılır (kısa devre yok)
        username_ok = constant_time_equals(username, self._credential.username.get_secret_value())
        password_ok = constant_time_equals(password, self._credential.password.get_secret_value())
        return username_ok and password_ok


class TokenService:
    def __init__(
        self,
        secret_key: str,
        ttl_seconds: int = TOKEN_TTL_SECONDS,
        algorithm: str = TOKEN_ALGORITHM,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret_key:
            raise ValueError("Token secret key must not be empty")
        self._secret_key = secret_key
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_credential(
        cls,
        credential: Credential,
        ttl_seconds: int = TOKEN_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> "TokenService":
        return cls(credential.secret_key.get_secret_value(), ttl_seconds=ttl_seconds, clock=clock)

    def issue(self, subject_id: str) -> SessionToken:
        if not isinstance(subject_id, str) or not subject_id.strip():
            raise InvalidInput("subject id is required")

        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        claims = {
            "sub": subject_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return SessionToken(token=token, subject_id=subject_id, expires_at=expires_at)

    def verify(self, presented_token: Optional[str]) -> str:
        if not presented_token:
            raise Unauthorized("Missing token")

        # imza önce; süre kontrolü bizde (now >= exp ise dolmuş)
        try:
            claims = jwt.decode(
                presented_token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            logger.info("Rejected invalid session token: %s", exc.__class__.__name__)
            raise Unauthorized() from exc

        expires_at = claims.get("exp")
        if not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            raise Unauthorized("Token missing expiry")
        if int(self._clock().timestamp()) >= expires_at:
            logger.info("Rejected expired session token")
            raise TokenExpired()

        subject_id = claims.get("sub")
        if not isinstance(subject_id, str) or not subject_id:
            raise Unauthorized("Token missing subject")
        return subject_id
