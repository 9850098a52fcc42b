"""
Base classes and interfaces for Environment integrations.

This module defines the abstract contracts that the Google adapters
implement, plus the exception types every adapter raises.

Design Pattern: Strategy Pattern
================================
- AuthProvider: Abstract base for OAuth authorization workflows
- UserinfoService: Abstract base for fetching the token holder's profile

Error Classification:
=====================
Adapters translate upstream HTTP status codes into these exceptions, and
the routers translate the exceptions into HTTP responses:

    401 from Google  -> UnauthorizedError -> 401
    404 from Google  -> NotFoundError     -> 404 (sections) / None (notes)
    anything else    -> APIError / StoreError -> 500
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.schemas.auth import Token
from app.schemas.user import User


# ---------------------------------------------------------------------------
# CUSTOM EXCEPTIONS
# ---------------------------------------------------------------------------


class ProviderError(Exception):
    """Base exception for all environment-related errors."""
    pass


class AuthenticationError(ProviderError):
    """Raised when an OAuth exchange or revocation with the provider fails."""
    pass


class TokenExpiredError(ProviderError):
    """Raised when an OAuth token refresh is rejected."""
    pass


class UnauthorizedError(ProviderError):
    """Raised when the provider rejects the caller's access token (HTTP 401)."""

    def __init__(self, message: str = "authorization token is invalid or expired"):
        super().__init__(message)


class NotFoundError(ProviderError):
    """Raised when the requested entity doesn't exist."""
    pass


class StoreError(ProviderError):
    """Raised when a storage operation fails for any other reason."""
    pass


class APIError(ProviderError):
    """Raised when an API call to the provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# ---------------------------------------------------------------------------
# ABSTRACT BASE CLASSES
# ---------------------------------------------------------------------------


class AuthProvider(ABC):
    """
    Abstract base class for OAuth authorization workflows
    (Google, Microsoft, etc.).

    Implementations are stateless: every call goes straight to the
    provider's endpoints.
    """

    provider_name: str = ""

    @abstractmethod
    def get_authorization_url(
        self,
        redirect_uri: Optional[str] = None,
        state: Optional[str] = None,
    ) -> str:
        """Build the consent-screen URL the user is sent to."""

    @abstractmethod
    async def exchange_code_for_tokens(
        self,
        code: str,
        redirect_uri: Optional[str] = None,
    ) -> Token:
        """
        Exchange authorization code for access/refresh tokens.

        Raises:
            AuthenticationError: If code exchange fails
        """

    @abstractmethod
    async def refresh_access_token(self, refresh_token: str) -> Token:
        """
        Use refresh token to get a new access token.

        Raises:
            TokenExpiredError: If refresh token is invalid/expired
        """

    @abstractmethod
    async def revoke_token(self, token: str) -> None:
        """
        Revoke an access or refresh token.

        Raises:
            AuthenticationError: If the provider refuses the revocation
        """


class UserinfoService(ABC):
    """Abstract base class for fetching the profile of the token holder."""

    @abstractmethod
    async def get(self) -> User:
        """Return the user associated with the access token."""
