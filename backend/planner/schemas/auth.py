"""
backend/planner/schemas/auth.py
Login isteği/cevabı ve oturum token'ı modelleri.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionToken(BaseModel):
    """Signed bearer token plus the data the transport needs (cookie lifetime)."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Signed JWT (opaque to clients)")
    subject_id: str = Field(..., description="uid the token was issued for")
    expires_at: datetime = Field(..., description="Absolute expiry (UTC)")


class LoginRequest(BaseModel):
    uid: Optional[str] = Field(None, description="Identity the session is issued for")


class MessageResponse(BaseModel):
    message: str
