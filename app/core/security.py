"""
Security utilities for JWT authentication.

Tokens are HS256-signed and carry the username and the isAdmin flag.
They are verified here; issuing them to clients is the job of whatever
service owns user accounts.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from app.core.config import settings
from app.schemas.auth import TokenPayload


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary containing claims to encode (typically {"username": ..., "isAdmin": ...})
        expires_delta: Optional expiration time delta (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def create_token(username: str, is_admin: bool = False) -> str:
    """Create an access token for a user."""
    return create_access_token({"username": username, "isAdmin": is_admin})


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token to decode

    Returns:
        TokenPayload with the username and admin flag

    Raises:
        JWTError: If token is invalid, expired, or lacks a username
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    if not payload.get("username"):
        raise JWTError("Token has no username")
    is_admin = payload.get("isAdmin", payload.get("is_admin", False))
    return TokenPayload(username=payload["username"], is_admin=bool(is_admin))
