"""
# `backend/planner/schemas/user.py` - User profile schemas

## `UserProfile`
| Field | Type | Notes |
|-------|------|-------|
| uid   | `str` | Identity the token is issued for; never changes |
| role  | `str` | `"Student"` (default) or `"Admin"` |
| ...   | any  | Allow-listed fields written through `update_user` |

## `VerifyEmailRequest`
Body of `POST /users/me/verify`. The address is validated by the service, not
here, so a malformed address maps to `InvalidInput` (400) rather than 422.
"""
from pydantic import BaseModel, ConfigDict, Field

from backend.planner.core.constants import DEFAULT_ROLE, ROLE_ADMIN


class UserProfile(BaseModel):
    model_config = ConfigDict(extra="allow")

    uid: str = Field(..., description="User identity")
    role: str = Field(DEFAULT_ROLE, description="Student | Admin")

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class SaveUserResult(BaseModel):
    existed: bool


class VerifyEmailRequest(BaseModel):
    email: str = Field("", description="Address to verify")
