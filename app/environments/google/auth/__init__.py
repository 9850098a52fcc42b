"""
Google Auth Module - OAuth 2.0 Authentication for Google Services

This module handles the OAuth 2.0 flow for Google APIs.

OAuth 2.0 Flow Overview:
========================
1. Client asks the API for the authorization URL
2. User is redirected to Google's consent screen and grants permissions
3. Google redirects back to a localhost callback with an authorization code
4. Client posts the code to the API, which exchanges it for tokens
5. Client sends the access token as a bearer token on every storage call

Scopes:
=======
Only drive.appdata (the hidden per-application folder) plus the profile
scopes needed by the userinfo endpoint are requested.
"""

from app.environments.google.auth.client import GoogleAuthClient
from app.environments.google.auth.schemas import (
    DRIVE_SCOPES,
    PROFILE_SCOPES,
    GoogleAuthConfig,
    GoogleTokenResponse,
    load_client_config,
)

__all__ = [
    "GoogleAuthClient",
    "GoogleAuthConfig",
    "GoogleTokenResponse",
    "load_client_config",
    "DRIVE_SCOPES",
    "PROFILE_SCOPES",
]
