"""
Password hashing, token signing and avatar helpers
"""

import hashlib
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from urllib.parse import urlencode

import jwt
from fastapi import HTTPException, status
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from devconnect.config.settings import Settings

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"
GRAVATAR_PARAMS = {"s": "200", "r": "pg", "d": "mm"}


class CurrentUser(BaseModel):
    id: str


class TokenData(BaseModel):
    user: CurrentUser
    iat: int
    exp: int


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str, rounds: int = 10) -> str:
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def gravatar_url(email: str) -> str:
    """Avatar URL for an email, 200px, pg rating, mystery-man fallback"""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}{digest}?{urlencode(GRAVATAR_PARAMS)}"


def create_access_token(user_id: str, settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "user": {"id": user_id},
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=settings.jwt_expires_hours)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> TokenData:
    """Verify signature and expiry, raising 401 on any failure"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
        return TokenData(**payload)
    except (jwt.PyJWTError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        )
