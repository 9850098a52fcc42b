"""
Shared helpers used by the adapters and routers.
"""

from typing import Dict, Iterable, List, Optional
from urllib.parse import urlparse

import httpx


def get_value_string(value: Optional[str], default: str) -> str:
    """Return value, or default when value is empty."""
    return value if value else default


def append_error(value: str, err: Optional[BaseException]) -> str:
    """Append the inner error message: "<value>: [<err>]"."""
    if value and err is not None:
        return f"{value}: [{err}]"
    return value


def sanitize_labels(labels: Optional[Iterable[str]]) -> List[str]:
    """Trim every label and drop the blank ones."""
    cleaned = []
    for label in labels or []:
        label = label.strip()
        if label:
            cleaned.append(label)
    return cleaned


def sanitize_map(values: Optional[Dict[str, str]]) -> Dict[str, str]:
    """
    Trim keys and values of a string map.

    Entries whose key is blank after trimming are removed. Values may end
    up empty, keys never do.
    """
    sanitized: Dict[str, str] = {}
    for key, value in (values or {}).items():
        clean_key = key.strip()
        if clean_key:
            sanitized[clean_key] = value.strip()
    return sanitized


def check_localhost_url(url: str) -> None:
    """
    Validate that url parses and points at localhost.

    Raises:
        ValueError: If the url is malformed or not a localhost url
    """
    try:
        parsed = urlparse(url)
        host = (parsed.netloc or "").lower()
    except ValueError as e:
        raise ValueError(append_error(f"the url '{url}' is invalid, parsing error", e)) from e

    if "localhost" not in host:
        raise ValueError(f"the url '{url}' must be a localhost url")


def client_with_token(access_token: str, timeout: float = 30.0) -> httpx.AsyncClient:
    """
    Create an async HTTP client that sends the access token as bearer auth.

    The caller owns the client and must close it (use it as an async
    context manager).
    """
    return httpx.AsyncClient(
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=timeout,
    )
