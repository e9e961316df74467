"""
Pydantic schemas for JWT token payloads.
"""

from pydantic import BaseModel


class TokenPayload(BaseModel):
    """Claims carried by an access token."""
    username: str
    is_admin: bool = False
