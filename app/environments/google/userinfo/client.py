"""
Google Userinfo Client - profile of the account that owns the access token.
"""

import logging

import httpx

from app.environments.base import APIError, UnauthorizedError, UserinfoService
from app.schemas.user import User


logger = logging.getLogger("typing.environments.google.userinfo")


class GoogleUserinfoClient(UserinfoService):
    """Reads the OAuth2 v2 userinfo endpoint with a token-scoped HTTP client."""

    USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    async def get(self) -> User:
        """
        Fetch the user's profile.

        Raises:
            UnauthorizedError: If Google rejects the access token
            APIError: On any other failure
        """
        logger.info("Fetching user info from Google")

        try:
            response = await self.http_client.get(self.USERINFO_URL)
        except httpx.RequestError as e:
            logger.error(f"Network error fetching user info: {e}")
            raise APIError(f"Network error: {e}") from e

        if response.status_code == 401:
            raise UnauthorizedError()

        if response.status_code != 200:
            logger.error(f"Failed to fetch user info: {response.text}")
            raise APIError(
                "failed to fetch user info",
                status_code=response.status_code,
                response=response.text,
            )

        data = response.json()
        return User(
            id=data.get("id") or "",
            name=data.get("name") or "",
            email=data.get("email") or "",
            picture=data.get("picture") or "",
        )
