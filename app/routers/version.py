"""
Version router - unauthenticated build information.
"""

from fastapi import APIRouter

from app.schemas.version import VersionValue
from app.version import get_version_string

router = APIRouter(prefix="/api", tags=["version"])


@router.get("/version", response_model=VersionValue)
def get_version():
    """Return the version string of the running server."""
    return VersionValue(version=get_version_string())
