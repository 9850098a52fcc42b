"""
Google OAuth Schemas - Data structures for Google authentication.

This module defines the data structures used in the Google OAuth flow:
the client credential file downloaded from the Google Cloud console and
the token endpoint response.
"""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError


# ---------------------------------------------------------------------------
# OAUTH SCOPE CONSTANTS
# ---------------------------------------------------------------------------
# Reference: https://developers.google.com/identity/protocols/oauth2/scopes

# Profile scopes - basic user information
PROFILE_SCOPES = [
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
]

# Drive scope - only the application's hidden app-data folder
DRIVE_SCOPES = [
    "https://www.googleapis.com/auth/drive.appdata",
]


# ---------------------------------------------------------------------------
# CONFIGURATION
# ---------------------------------------------------------------------------

class GoogleAuthConfig(BaseModel):
    """
    Configuration for Google OAuth client.

    Loaded from the client credential JSON file with load_client_config().
    """
    client_id: str = Field(..., description="Google OAuth Client ID")
    client_secret: str = Field(..., description="Google OAuth Client Secret")
    redirect_uris: List[str] = Field(default_factory=list, description="Registered callback URLs")
    auth_uri: str = Field(
        "https://accounts.google.com/o/oauth2/auth",
        description="Consent screen endpoint",
    )
    token_uri: str = Field(
        "https://oauth2.googleapis.com/token",
        description="Token endpoint",
    )

    @property
    def redirect_uri(self) -> str:
        """Default callback URL (the first registered one)."""
        return self.redirect_uris[0] if self.redirect_uris else ""


def load_client_config(path: Union[str, Path]) -> GoogleAuthConfig:
    """
    Read a Google client credential file.

    The file is the JSON downloaded from the Google Cloud console, with the
    client under a "web" or "installed" key:

    {
        "web": {
            "client_id": "1234.apps.googleusercontent.com",
            "client_secret": "GOCSPX-...",
            "redirect_uris": ["http://localhost:8080/callback"],
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token"
        }
    }

    Raises:
        OSError: If the file can't be read
        ValueError: If the content is not a valid credential file
    """
    content = Path(path).read_text()
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"client credential file '{path}' is not valid json: [{e}]") from e

    section = None
    if isinstance(data, dict):
        section = data.get("web") or data.get("installed")
    if not isinstance(section, dict):
        raise ValueError(f"client credential file '{path}' has no 'web' or 'installed' section")

    try:
        return GoogleAuthConfig(**section)
    except ValidationError as e:
        raise ValueError(f"client credential file '{path}' is invalid: [{e}]") from e


# ---------------------------------------------------------------------------
# TOKEN RESPONSES
# ---------------------------------------------------------------------------

class GoogleTokenResponse(BaseModel):
    """
    Response from Google's token endpoint.

    This is what Google returns when we exchange an auth code for tokens,
    or when we refresh an access token.

    Example response from Google:
    {
        "access_token": "ya29.a0AfB_byC...",
        "expires_in": 3599,
        "refresh_token": "1//0eXyz...",
        "scope": "https://www.googleapis.com/auth/drive.appdata ...",
        "token_type": "Bearer"
    }
    """
    access_token: str = Field(..., description="OAuth access token")
    token_type: str = Field(default="Bearer", description="Token type (usually Bearer)")
    expires_in: Optional[int] = Field(None, description="Seconds until expiration")
    refresh_token: Optional[str] = Field(None, description="Refresh token for renewal")
    scope: Optional[str] = Field(None, description="Space-separated scopes granted")

    def get_expires_at(self) -> Optional[datetime]:
        """Calculate expiration datetime from expires_in seconds."""
        if self.expires_in:
            return datetime.now(timezone.utc) + timedelta(seconds=self.expires_in)
        return None
