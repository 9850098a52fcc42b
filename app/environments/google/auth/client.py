"""
Google OAuth Client - Handles OAuth 2.0 flow with Google APIs.

This client implements the Google OAuth 2.0 authorization code flow for
an installed/web application that stores its data in the user's Drive
app-data folder. It keeps no state: tokens are handed back to the caller,
who sends the access token on every storage request.

Key Features:
=============
1. Authorization URL generation with the drive.appdata + profile scopes
2. Code-to-token exchange
3. Token refresh for seamless access
4. Token revocation for logout/disconnect

OAuth 2.0 Flow Implementation:
==============================
1. get_authorization_url() → User redirected to Google
2. exchange_code_for_tokens() → Called with the code from the callback
3. refresh_access_token() → Renew expired access tokens
4. revoke_token() → Invalidate a token on Google's side

References:
===========
- OAuth 2.0: https://developers.google.com/identity/protocols/oauth2
- Token endpoint: https://oauth2.googleapis.com/token
- Revocation: https://oauth2.googleapis.com/revoke
"""

import logging
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx

from app.core.config import settings
from app.core.utils import get_value_string
from app.environments.base import (
    AuthProvider,
    AuthenticationError,
    TokenExpiredError,
)
from app.environments.google.auth.schemas import (
    DRIVE_SCOPES,
    PROFILE_SCOPES,
    GoogleAuthConfig,
    GoogleTokenResponse,
)
from app.schemas.auth import Token


logger = logging.getLogger("typing.environments.google.auth")

DEFAULT_STATE = "0"


class GoogleAuthClient(AuthProvider):
    """
    Google OAuth 2.0 Client implementation.

    Example Usage:
        client = GoogleAuthClient(load_client_config("/etc/typing/google_client_cred.json"))

        # Step 1: Generate auth URL and send the user there
        auth_url = client.get_authorization_url("http://localhost:8080/callback")

        # Step 2: Exchange the code Google sent to the callback
        token = await client.exchange_code_for_tokens(code="4/0Ab...")

        # Step 3: Later, renew the access token
        token = await client.refresh_access_token(token.refresh_token)
    """

    provider_name = "google"

    REVOKE_URL = "https://oauth2.googleapis.com/revoke"
    SCOPES = DRIVE_SCOPES + PROFILE_SCOPES

    def __init__(
        self,
        config: GoogleAuthConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Google OAuth client.

        Args:
            config: Client id/secret and endpoints from the credential file
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=settings.HTTP_TIMEOUT)

    # -------------------------------------------------------------------------
    # AUTHORIZATION URL
    # -------------------------------------------------------------------------

    def get_authorization_url(
        self,
        redirect_uri: Optional[str] = None,
        state: Optional[str] = None,
    ) -> str:
        """
        Generate the Google OAuth authorization URL.

        Args:
            redirect_uri: Override the first registered callback URL
            state: Opaque value echoed back to the callback (defaults to "0")

        Returns:
            Full authorization URL to redirect the user to
        """
        params = {
            "access_type": "offline",  # include refresh_token
            "client_id": self.config.client_id,
            "redirect_uri": redirect_uri or self.config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.SCOPES),
            "state": get_value_string(state, DEFAULT_STATE),
        }

        auth_url = f"{self.config.auth_uri}?{urlencode(params)}"
        logger.debug(f"Generated Google auth URL with {len(self.SCOPES)} scopes")
        return auth_url

    # -------------------------------------------------------------------------
    # TOKEN EXCHANGE
    # -------------------------------------------------------------------------

    async def exchange_code_for_tokens(
        self,
        code: str,
        redirect_uri: Optional[str] = None,
    ) -> Token:
        """
        Exchange authorization code for access and refresh tokens.

        Args:
            code: Authorization code from Google callback
            redirect_uri: Must match the redirect_uri used in authorization

        Returns:
            Token with access token, refresh token and expiry

        Raises:
            AuthenticationError: If token exchange fails
        """
        token_data = {
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri or self.config.redirect_uri,
        }

        logger.info("Exchanging authorization code for tokens")

        async with self._http_client() as client:
            try:
                response = await client.post(self.config.token_uri, data=token_data)
            except httpx.RequestError as e:
                logger.error(f"Network error during token exchange: {e}")
                raise AuthenticationError(f"Network error: {e}") from e

        if response.status_code != 200:
            error_msg = self._error_message(response)
            logger.error(f"Token exchange failed: {error_msg}")
            raise AuthenticationError(f"Token exchange failed: {error_msg}")

        token_response = GoogleTokenResponse(**response.json())
        logger.info(
            "Successfully obtained Google tokens",
            extra={
                "has_refresh_token": token_response.refresh_token is not None,
                "expires_in": token_response.expires_in,
            },
        )

        return Token(
            access_token=token_response.access_token,
            refresh_token=token_response.refresh_token,
            expiry=token_response.get_expires_at(),
        )

    # -------------------------------------------------------------------------
    # TOKEN REFRESH
    # -------------------------------------------------------------------------

    async def refresh_access_token(self, refresh_token: str) -> Token:
        """
        Use refresh token to get a new access token.

        Args:
            refresh_token: The refresh token from initial authorization

        Returns:
            Token with new access token (refresh token usually unchanged)

        Raises:
            TokenExpiredError: If refresh token is invalid or revoked
        """
        refresh_data = {
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }

        logger.info("Refreshing access token")

        async with self._http_client() as client:
            try:
                response = await client.post(self.config.token_uri, data=refresh_data)
            except httpx.RequestError as e:
                logger.error(f"Network error during token refresh: {e}")
                raise TokenExpiredError(f"Network error: {e}") from e

        if response.status_code != 200:
            error_msg = self._error_message(response)
            logger.error(f"Token refresh failed: {error_msg}")
            raise TokenExpiredError(f"Token refresh failed: {error_msg}")

        token_response = GoogleTokenResponse(**response.json())
        logger.info(
            "Successfully refreshed access token",
            extra={"expires_in": token_response.expires_in},
        )

        # Google may or may not return a new refresh_token
        return Token(
            access_token=token_response.access_token,
            refresh_token=token_response.refresh_token or refresh_token,
            expiry=token_response.get_expires_at(),
        )

    # -------------------------------------------------------------------------
    # TOKEN REVOCATION
    # -------------------------------------------------------------------------

    async def revoke_token(self, token: str) -> None:
        """
        Revoke an access or refresh token.

        Args:
            token: Access token or refresh token to revoke

        Raises:
            AuthenticationError: If Google doesn't answer with 200
        """
        logger.info("Revoking Google token")

        async with self._http_client() as client:
            try:
                response = await client.post(
                    self.REVOKE_URL,
                    data={"token": token},
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
            except httpx.RequestError as e:
                logger.error(f"Network error during token revocation: {e}")
                raise AuthenticationError(f"Network error: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Token revocation returned status {response.status_code}")
            raise AuthenticationError(
                f"access token revocation failed with '{response.status_code}' status code"
            )

        logger.info("Successfully revoked Google token")

    # -------------------------------------------------------------------------
    # UTILITY METHODS
    # -------------------------------------------------------------------------

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error_data: Dict = response.json() if response.content else {}
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}
        return error_data.get("error_description") or error_data.get("error") or response.text
