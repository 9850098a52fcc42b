"""
Google Environment Module - Google API Integration

This module provides the Google services the notes API is built on:
- OAuth 2.0 (sign-in, token refresh and revocation)
- Userinfo (profile of the token holder)
- Drive (notes and sections stored in the app-data folder)

Architecture:
=============
google/
├── __init__.py           # Module exports
├── auth/                 # OAuth authentication
│   ├── client.py         # Google OAuth implementation
│   └── schemas.py        # Credential file and token structures
├── userinfo/             # OAuth2 v2 userinfo endpoint
│   └── client.py
└── drive/                # Drive v3 files resource
    ├── client.py         # Drive API client
    └── schemas.py        # File resource structures

Usage:
======
    from app.environments.google import GoogleAuthClient, GoogleDriveClient

    auth_client = GoogleAuthClient(load_client_config(path))
    token = await auth_client.exchange_code_for_tokens(code)

    async with client_with_token(token.access_token) as http_client:
        drive = GoogleDriveClient(http_client)
        page = await drive.list_files()
"""

from app.environments.google.auth import GoogleAuthClient, GoogleAuthConfig, load_client_config
from app.environments.google.drive import DriveFile, GoogleDriveClient
from app.environments.google.userinfo import GoogleUserinfoClient

__all__ = [
    "GoogleAuthClient",
    "GoogleAuthConfig",
    "GoogleDriveClient",
    "GoogleUserinfoClient",
    "DriveFile",
    "load_client_config",
]
