"""
FastAPI Authentication Dependencies

API key check for programmatic access. Disabled unless REQUIRE_AUTH is set.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader, HTTPBearer, HTTPAuthorizationCredentials

from src.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)
bearer = HTTPBearer(auto_error=False)


def _key_is_known(api_key: str, known_keys) -> bool:
    return any(secrets.compare_digest(api_key, known) for known in known_keys)


async def require_api_key(
    request: Request,
    header_key: Optional[str] = Depends(api_key_header),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    settings: Settings = Depends(get_settings),
) -> Optional[str]:
    """
    Validate the caller's API key.

    Accepts either an X-API-Key header or an Authorization Bearer token.

    Raises:
        HTTPException 401: If auth is required and the key is missing or unknown
    """
    if not settings.REQUIRE_AUTH:
        return None

    api_key = header_key or (credentials.credentials if credentials else None)

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Include X-API-Key header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not _key_is_known(api_key, settings.api_key_list):
        logger.warning(f"Rejected API key for {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return api_key
