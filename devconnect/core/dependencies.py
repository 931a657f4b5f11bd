"""
Core dependencies for route protection
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader
from devconnect.config.settings import Settings, get_settings
from devconnect.core.security import CurrentUser, decode_token
from typing import Optional

token_header = APIKeyHeader(name="x-auth-token", auto_error=False)


def get_current_user(
    token: Optional[str] = Security(token_header),
    settings: Settings = Depends(get_settings)
) -> CurrentUser:
    """Resolve the caller's identity from the x-auth-token header"""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied"
        )
    return decode_token(token, settings).user
