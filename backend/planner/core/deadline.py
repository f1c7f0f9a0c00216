# backend/planner/core/deadline.py
import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from google.api_core.exceptions import GoogleAPICallError, RetryError
from google.auth.exceptions import GoogleAuthError

from backend.planner.core.errors import Unavailable

logger = logging.getLogger("planner.store")

T = TypeVar("T")


async def run_with_deadline(
    awaitable: Awaitable[T],
    timeout: Optional[float],
    operation: str = "store operation",
) -> T:
    """
    Tek bir Firestore gidiş-dönüşünü süre sınırıyla çalıştırır.
    - Süre dolarsa `Unavailable`
    - google.api_core ve google.auth (token yenileme, transport) hataları
      `Unavailable` olarak sarılır (detay istemciye sızmaz)
    - Domain hataları (NotFound, InvalidInput ...) olduğu gibi geçer
    """
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as exc:
        logger.warning("%s timed out after %ss", operation, timeout)
        raise Unavailable(f"{operation} timed out") from exc
    except (GoogleAPICallError, RetryError, GoogleAuthError) as exc:
        logger.exception("%s failed", operation)
        raise Unavailable() from exc
