"""
Sign-in auth router - Google OAuth 2.0 authorization workflow.

Endpoints:
- GET  /api/v1/signin/auth/url     - Authorization URL for the consent screen
- POST /api/v1/signin/auth/token   - Exchange an authorization code for tokens
- POST /api/v1/signin/auth/refresh - Renew the access token
- POST /api/v1/signin/auth/revoke  - Revoke a token

OAuth Flow:
===========
1. Client calls GET /url?redirect=http://localhost:<port>/callback
2. User signs in on Google and is redirected to the localhost callback
3. Client posts the code to /token and keeps the returned tokens
4. Client sends "Authorization: Bearer <accessToken>" to storage endpoints

None of these endpoints need a bearer token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Response, status

from app.core.utils import append_error, check_localhost_url
from app.deps import get_auth
from app.environments.base import AuthProvider, ProviderError
from app.schemas.auth import Token, URLValue


logger = logging.getLogger("typing.routers.auth")

# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/api/v1/signin/auth", tags=["auth"])


def _bad_request(message: str) -> HTTPException:
    logger.warning(message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _server_error(message: str, err: Exception) -> HTTPException:
    logger.error(append_error(message, err))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# ---------------------------------------------------------------------------
# AUTHORIZATION URL
# ---------------------------------------------------------------------------

@router.get("/url", response_model=URLValue)
def get_url(
    redirect: Optional[str] = Query(None, description="Localhost callback URL"),
    state: Optional[str] = Query(None, description="Opaque value echoed to the callback"),
    auth: AuthProvider = Depends(get_auth),
):
    """
    Return the Google consent-screen URL.

    The redirect, when given, must be a localhost URL.
    """
    if redirect:
        try:
            check_localhost_url(redirect)
        except ValueError as e:
            msg = "redirect url is invalid or is not a localhost url"
            logger.warning(append_error(msg, e))
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=msg)

    return URLValue(url=auth.get_authorization_url(redirect, state))


# ---------------------------------------------------------------------------
# TOKENS
# ---------------------------------------------------------------------------

@router.post("/token", response_model=Token, response_model_exclude_none=True)
async def exchange(
    auth_code: str = Form(""),
    redirect: Optional[str] = Form(None),
    auth: AuthProvider = Depends(get_auth),
):
    """Exchange the authorization code for access and refresh tokens."""
    if not auth_code:
        raise _bad_request("authorization code is empty")

    try:
        return await auth.exchange_code_for_tokens(auth_code, redirect or None)
    except ProviderError as e:
        raise _server_error("token exchange failed, check the authorization code", e)


@router.post("/refresh", response_model=Token, response_model_exclude_none=True)
async def refresh(
    refresh_token: str = Form(""),
    auth: AuthProvider = Depends(get_auth),
):
    """Renew the access token using the refresh token."""
    if not refresh_token:
        raise _bad_request("refresh token is empty")

    try:
        return await auth.refresh_access_token(refresh_token)
    except ProviderError as e:
        raise _server_error("access token refresh failed, check the token", e)


@router.post("/revoke", status_code=status.HTTP_204_NO_CONTENT)
async def revoke(
    token: str = Form(""),
    auth: AuthProvider = Depends(get_auth),
):
    """
    Revoke a token. The user has to go through the authorization
    workflow again afterwards.
    """
    if not token:
        raise _bad_request("token value is empty")

    try:
        await auth.revoke_token(token)
    except ProviderError as e:
        raise _server_error("token revocation failed, check the token value", e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
