"""
Version string of the running build.
"""

import platform
import sys

from app.core.config import settings


def get_version_string() -> str:
    """Return e.g. "Typing 0.1.0-1 linux/x86_64"."""
    return (
        f"{settings.APP_NAME} {settings.VERSION}-{settings.BUILD_NUMBER} "
        f"{sys.platform}/{platform.machine().lower()}"
    )
