"""
# backend/planner/routers/auth.py - Authentication

## POST /login
Purpose: the shared admin operator opens a session for a user identity.

Input:
- `Authorization: Basic base64(username:password)` (required)
- JSON body: `{"uid": "<user id>"}`

Flow:
1. Header missing / malformed / wrong credentials → `401 Unauthorized`
   (wrong username and wrong password look the same).
2. Body unreadable, not an object, or `uid` missing / not a non-empty string
   → `400 Incomplete request`. The body is only read after step 1.
3. A 1-hour session token is set as the `token` cookie
   (HttpOnly, Secure, SameSite=Strict) → `200 {"message": "Login successful"}`.

Other HTTP methods get `405` from the router.

## POST /logout
Deletes the `token` cookie. The token itself stays valid until it expires;
there is no server-side revocation.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import ValidationError

from backend.planner.config import Settings, get_settings
from backend.planner.core.constants import TOKEN_COOKIE_NAME
from backend.planner.core.dependencies import get_credential_gate, get_token_service
from backend.planner.core.security import CredentialGate, TokenService
from backend.planner.schemas.auth import LoginRequest, MessageResponse

logger = logging.getLogger("planner.auth")

router = APIRouter(tags=["Auth"])

basic_scheme = HTTPBasic(auto_error=False)


async def _read_uid(request: Request) -> Optional[str]:
    """Body'den uid; JSON değilse / obje değilse / uid string değilse None."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    try:
        uid = LoginRequest.model_validate(payload).uid
    except ValidationError:
        return None
    return uid if uid and uid.strip() else None


@router.post(
    "/login",
    response_model=MessageResponse,
    summary="Admin login for a user identity",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}},
        }
    },
)
async def login(
    request: Request,
    response: Response,
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    gate: CredentialGate = Depends(get_credential_gate),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    # body credential kontrolünden sonra okunur: kimlik yoksa her zaman 401
    if credentials is None or not gate.authenticate(credentials.username, credentials.password):
        logger.warning("Login rejected: invalid or missing credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )

    uid = await _read_uid(request)
    if uid is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Incomplete request")

    session = tokens.issue(uid)
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        session.token,
        max_age=settings.token_ttl_seconds,
        httponly=True,
        secure=True,
        samesite="strict",
    )
    logger.info("Session issued for uid %s", uid)
    return MessageResponse(message="Login successful")


@router.post("/logout", response_model=MessageResponse, summary="Drop the session cookie")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, httponly=True, secure=True, samesite="strict")
    return MessageResponse(message="Logged out")
