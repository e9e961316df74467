"""
FastAPI dependencies for authentication and authorization.

get_current_user never fails: a missing or bad token means an anonymous
request. Routes that need a user depend on ensure_logged_in or ensure_admin.
"""

import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from typing import Optional

from app.core.exceptions import Unauthorized
from app.core.security import decode_token
from app.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[TokenPayload]:
    """
    Extract the user from the JWT token if one was provided.

    Returns None if no token was sent or the token is invalid.
    """
    if not credentials:
        return None

    try:
        return decode_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        return None


async def ensure_logged_in(
    user: Optional[TokenPayload] = Depends(get_current_user),
) -> TokenPayload:
    """
    Require an authenticated user.

    Raises:
        Unauthorized: If no valid token was provided
    """
    if user is None:
        raise Unauthorized()
    return user


async def ensure_admin(
    user: Optional[TokenPayload] = Depends(get_current_user),
) -> TokenPayload:
    """
    Require an authenticated admin user.

    Raises:
        Unauthorized: If the caller is anonymous or not an admin
    """
    if user is None or not user.is_admin:
        raise Unauthorized()
    return user

