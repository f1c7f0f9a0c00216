# backend/planner/routers/common.py
"""
Router-side helpers: required query parameters, numeric parsing and the single
place where core errors become HTTP status codes.
"""
import logging
import math
from typing import Any, Iterable, Optional, Union

from fastapi import HTTPException, status

from backend.planner.core.errors import (
    InvalidInput,
    NotFound,
    PlannerError,
    TokenExpired,
    Unauthorized,
    Unavailable,
)

logger = logging.getLogger("planner.routers")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def require_param(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return value.strip()


def parse_numeric(value: str, name: str) -> Union[int, float]:
    """Query string → sayı. Başarısızsa InvalidInput (NaN filtreye gitmez)."""
    try:
        number = int(value)
    except ValueError:
        pass
    else:
        # Firestore tamsayıları int64
        if not INT64_MIN <= number <= INT64_MAX:
            raise InvalidInput(f"{name} is out of range")
        return number
    try:
        number = float(value)
    except ValueError as exc:
        raise InvalidInput(f"{name} must be numeric") from exc
    if not math.isfinite(number):
        raise InvalidInput(f"{name} must be numeric")
    return number


def http_error(exc: PlannerError, failure_message: str) -> HTTPException:
    if isinstance(exc, TokenExpired):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, "Token has expired")
    if isinstance(exc, Unauthorized):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
    if isinstance(exc, InvalidInput):
        return HTTPException(status.HTTP_400_BAD_REQUEST, exc.message)
    if isinstance(exc, NotFound):
        return HTTPException(status.HTTP_404_NOT_FOUND, exc.message)
    if isinstance(exc, Unavailable):
        logger.error("%s: %s", failure_message, exc.message)
    return HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, f"{failure_message}: {exc.message}")


def dump_all(items: Iterable[Any]) -> list:
    return [item.model_dump() for item in items]
