"""
Dependencies module - reusable FastAPI dependencies for route handlers.

The storage and userinfo routes need an adapter bound to the caller's
Google access token:

    Authorization header -> get_access_token -> get_http_client
        -> container.get_instance(InstanceType.X, http_client)

get_http_client is a yield dependency, so the token-scoped HTTP client is
closed once the response has been sent.
"""

import logging
from typing import Any, AsyncIterator, Optional

import httpx
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from app.core.config import settings
from app.core.container import Container, ContainerError, InstanceType
from app.core.utils import client_with_token
from app.environments.base import AuthProvider, UserinfoService
from app.services.notestore import Notestore
from app.services.sectionstore import Sectionstore


logger = logging.getLogger("typing.deps")

BEARER_SCHEME = "Bearer"

# ---------------------------------------------------------------------------
# SECURITY SCHEME
# ---------------------------------------------------------------------------
# The raw header is read (auto_error=False) so a missing header and a
# malformed one get different messages. Also adds the lock icon in Swagger UI.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_access_token(authorization: Optional[str] = Depends(authorization_header)) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        401 Unauthorized: If the header is missing, doesn't start with
            "Bearer" or carries an empty token
    """
    if not authorization:
        msg = "authorization header is empty, set valid authorization token"
        logger.warning(msg)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=msg)

    token = ""
    if authorization.startswith(BEARER_SCHEME):
        token = authorization[len(BEARER_SCHEME):].strip()

    if not token:
        msg = "authorization token is in invalid format"
        logger.warning(msg)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=msg)

    return token


def get_container(request: Request) -> Container:
    """The instance container built at startup (see app.main.create_app)."""
    return request.app.state.container


async def get_http_client(
    access_token: str = Depends(get_access_token),
) -> AsyncIterator[httpx.AsyncClient]:
    async with client_with_token(access_token, timeout=settings.HTTP_TIMEOUT) as client:
        yield client


def _instance(container: Container, instance_type: InstanceType, *params: Any) -> Any:
    try:
        return container.get_instance(instance_type, *params)
    except ContainerError as e:
        logger.error(f"Unable to build {instance_type.value} instance: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal server error",
        ) from e


# ---------------------------------------------------------------------------
# ADAPTERS
# ---------------------------------------------------------------------------

def get_auth(container: Container = Depends(get_container)) -> AuthProvider:
    return _instance(container, InstanceType.AUTH)


def get_userinfo(
    container: Container = Depends(get_container),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> UserinfoService:
    return _instance(container, InstanceType.USERINFO, http_client)


def get_notestore(
    container: Container = Depends(get_container),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Notestore:
    return _instance(container, InstanceType.NOTESTORE, http_client)


def get_sectionstore(
    container: Container = Depends(get_container),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Sectionstore:
    return _instance(container, InstanceType.SECTIONSTORE, http_client)
