# backend/planner/core/auth.py
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.planner.config import Settings, get_settings
from backend.planner.core.constants import TOKEN_COOKIE_NAME
from backend.planner.core.dependencies import get_token_service
from backend.planner.core.errors import TokenExpired, Unauthorized
from backend.planner.core.security import TokenService

# Authorization: Bearer <token>; yoksa hata fırlatma kontrolü bizde
bearer_scheme = HTTPBearer(auto_error=False)


def _extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    transport: str,
) -> Optional[str]:
    """
    Token'ı ayarlı taşıyıcıdan okur:
    - header: Authorization: Bearer <token>
    - cookie: token=<token>
    - both  : önce header, sonra cookie
    """
    if transport in ("header", "both") and credentials and credentials.credentials:
        return credentials.credentials
    if transport in ("cookie", "both"):
        return request.cookies.get(TOKEN_COOKIE_NAME)
    return None


async def get_subject_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Token zorunlu: doğrular ve token'ın verildiği uid'yi döner.
    Süresi dolmuş token ile geçersiz/eksik token ayrı mesajla 401 döner.
    """
    token = _extract_token(request, credentials, settings.token_transport)
    try:
        return tokens.verify(token)
    except TokenExpired:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except Unauthorized:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
