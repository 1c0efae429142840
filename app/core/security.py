# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import settings
from app.core.exceptions import UnauthorizedError


# =====================================================================
# JWT TOKEN CONFIGURATION
# =====================================================================

# auto_error is off so a missing header surfaces as our own 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


# =====================================================================
# TOKEN CREATION
# =====================================================================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token.

    Args:
        data: Dictionary containing user data (typically {"sub": user_id})
        expires_delta: Optional lifetime override

    Returns:
        Encoded JWT access token
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    )
    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )
    return encoded_jwt


# =====================================================================
# TOKEN VERIFICATION
# =====================================================================

def verify_access_token(token: str) -> UUID:
    """
    Verify JWT access token and return the user id it carries.

    Args:
        token: JWT token string

    Returns:
        User ID from token

    Raises:
        UnauthorizedError: If token is invalid, expired, or of the wrong type
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise UnauthorizedError("Invalid token")

    user_id = payload.get("sub")
    if user_id is None or payload.get("type") != "access":
        raise UnauthorizedError("Invalid token")

    try:
        return UUID(user_id)
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid token")


# =====================================================================
# USER AUTHENTICATION DEPENDENCIES
# =====================================================================

async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UUID:
    """
    Resolve the requesting user's id from the Bearer token.

    This is the only gate in front of the resource routes. The user row is
    not re-read, so a token outlives a deleted account until it expires.

    Raises:
        UnauthorizedError: If the header is missing/malformed or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token provided")

    return verify_access_token(credentials.credentials)
