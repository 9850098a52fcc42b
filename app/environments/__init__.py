"""
Environments Module - External Service Integrations

This module wraps the external APIs the notes service talks to.

Architecture Overview:
======================
environments/
├── __init__.py           # Module exports
├── base.py               # Abstract base classes and exceptions
└── google/               # Google integration
    ├── auth/             # Google OAuth authentication
    ├── userinfo/         # Profile of the token holder
    └── drive/            # Drive app-data folder storage

Design Principles:
==================
1. Single Responsibility: Each service has its own module
2. Shared Authentication: One access token works for Drive and userinfo
3. Testability: Clients accept an injected httpx client or transport
"""

from app.environments.base import (
    APIError,
    AuthenticationError,
    AuthProvider,
    NotFoundError,
    ProviderError,
    StoreError,
    TokenExpiredError,
    UnauthorizedError,
    UserinfoService,
)

__all__ = [
    "AuthProvider",
    "UserinfoService",
    "ProviderError",
    "AuthenticationError",
    "TokenExpiredError",
    "UnauthorizedError",
    "NotFoundError",
    "StoreError",
    "APIError",
]
