"""
Auth schemas - Pydantic models for the OAuth sign-in endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """
    Credentials returned by the token exchange and refresh endpoints.

    Example response:
    {
        "accessToken": "ya29.a0AfB_byC...",
        "refreshToken": "1//0eXyz...",
        "expiry": "2024-01-01T11:00:00Z"
    }

    The client sends accessToken as "Authorization: Bearer <accessToken>"
    on every storage call, and uses refreshToken to renew it.
    """
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    refresh_token: Optional[str] = Field(None, alias="refreshToken")
    expiry: Optional[datetime] = None


class URLValue(BaseModel):
    """Response of GET /api/v1/signin/auth/url."""
    url: str
