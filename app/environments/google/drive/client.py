"""
Google Drive Client - Thin async wrapper over the Drive v3 REST API.

Every call goes through _make_request(), which turns Drive status codes
into the environment exceptions:

    401          -> UnauthorizedError
    404          -> NotFoundError
    other non-2xx, network errors -> APIError

The client does not own the HTTP client it is given; the caller creates a
token-scoped httpx.AsyncClient per request and closes it afterwards.

API Reference:
==============
https://developers.google.com/drive/api/reference/rest/v3/files
"""

import logging
from typing import Any, Dict, Optional

import httpx

from app.environments.base import APIError, NotFoundError, UnauthorizedError
from app.environments.google.drive.schemas import (
    APP_DATA_FOLDER,
    FILE_FIELDS,
    DriveFile,
    DriveFileList,
)


logger = logging.getLogger("typing.environments.google.drive")


class GoogleDriveClient:
    """
    Client for the Drive files resource, restricted to the app-data folder.

    Usage:
        async with client_with_token(access_token) as http_client:
            drive = GoogleDriveClient(http_client)
            page = await drive.list_files()
    """

    BASE_URL = "https://www.googleapis.com/drive/v3"
    UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3"

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    # -------------------------------------------------------------------------
    # HTTP HELPERS
    # -------------------------------------------------------------------------

    async def _make_request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send a request to Drive and classify the response status.

        Raises:
            UnauthorizedError: On 401
            NotFoundError: On 404
            APIError: On any other failure
        """
        try:
            response = await self.http_client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Network error in Drive API: {e}")
            raise APIError(f"Network error: {e}") from e

        if response.status_code == 401:
            logger.warning("Drive API: Unauthorized (token may be expired)")
            raise UnauthorizedError()

        if response.status_code == 404:
            logger.debug(f"Drive API: {method} {url} not found")
            raise NotFoundError("file not found")

        if not response.is_success:
            error_detail = response.text
            logger.error(f"Drive API error: {response.status_code} - {error_detail}")
            raise APIError(
                f"drive request failed with '{response.status_code}' status code",
                status_code=response.status_code,
                response=error_detail,
            )

        return response

    # -------------------------------------------------------------------------
    # FILE METADATA
    # -------------------------------------------------------------------------

    async def create_file(self, metadata: Dict[str, Any]) -> DriveFile:
        """Create a file in the app-data folder from a metadata body."""
        body = dict(metadata)
        body.setdefault("parents", [APP_DATA_FOLDER])
        response = await self._make_request(
            "POST", f"{self.BASE_URL}/files", params={"fields": FILE_FIELDS}, json=body,
        )
        file = DriveFile.model_validate(response.json())
        logger.info(f"Created Drive file {file.id}")
        return file

    async def list_files(self, page_token: Optional[str] = None) -> DriveFileList:
        """Return one page of files from the app-data folder."""
        params = {
            "spaces": APP_DATA_FOLDER,
            "fields": f"nextPageToken, files({FILE_FIELDS})",
        }
        if page_token:
            params["pageToken"] = page_token

        response = await self._make_request("GET", f"{self.BASE_URL}/files", params=params)
        return DriveFileList.model_validate(response.json())

    async def get_file(self, file_id: str) -> DriveFile:
        response = await self._make_request(
            "GET", f"{self.BASE_URL}/files/{file_id}", params={"fields": FILE_FIELDS},
        )
        return DriveFile.model_validate(response.json())

    async def update_file(self, file_id: str, metadata: Dict[str, Any]) -> DriveFile:
        """
        Patch file metadata.

        Keys mapped to None are sent as JSON null, which clears them on
        Drive (this is how properties are removed).
        """
        response = await self._make_request(
            "PATCH",
            f"{self.BASE_URL}/files/{file_id}",
            params={"fields": FILE_FIELDS},
            json=metadata,
        )
        file = DriveFile.model_validate(response.json())
        logger.info(f"Updated Drive file {file_id}")
        return file

    async def delete_file(self, file_id: str) -> None:
        await self._make_request("DELETE", f"{self.BASE_URL}/files/{file_id}")
        logger.info(f"Deleted Drive file {file_id}")

    # -------------------------------------------------------------------------
    # FILE CONTENT
    # -------------------------------------------------------------------------

    async def download(self, file_id: str) -> bytes:
        """Download the raw content of a file."""
        response = await self._make_request(
            "GET", f"{self.BASE_URL}/files/{file_id}", params={"alt": "media"},
        )
        return response.content

    async def upload(self, file_id: str, content: bytes, mime_type: str = "application/json") -> None:
        """Replace the content of a file (simple media upload)."""
        await self._make_request(
            "PATCH",
            f"{self.UPLOAD_URL}/files/{file_id}",
            params={"uploadType": "media"},
            content=content,
            headers={"Content-Type": mime_type},
        )
        logger.debug(f"Uploaded {len(content)} bytes to Drive file {file_id}")
