"""
Error helpers shared by the storage and sign-in routers.
"""

import logging

from fastapi import HTTPException, status

from app.core.utils import append_error
from app.environments.base import NotFoundError, UnauthorizedError


logger = logging.getLogger("typing.routers")


def build_http_error(err: Exception, message: str) -> HTTPException:
    """
    Translate an adapter error into an HTTP error.

    NotFoundError -> 404 with the error's own message
    UnauthorizedError -> 401 with the error's own message
    anything else -> 500 with the given message (the inner error is logged)
    """
    if isinstance(err, NotFoundError):
        logger.warning(str(err))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))

    if isinstance(err, UnauthorizedError):
        logger.warning(append_error(message, err))
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(err))

    logger.error(append_error(message, err))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def not_found(message: str) -> HTTPException:
    logger.warning(message)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
