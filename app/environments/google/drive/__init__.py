"""
Google Drive Module - file storage in the application's app-data folder.

Notes are stored as Drive files in the hidden "appDataFolder" space, which
only this application can see. Metadata lives in file properties and
sections live in the file content.
"""

from app.environments.google.drive.client import GoogleDriveClient
from app.environments.google.drive.schemas import (
    APP_DATA_FOLDER,
    FILE_FIELDS,
    JSON_MIME_TYPE,
    DriveFile,
    DriveFileList,
)

__all__ = [
    "GoogleDriveClient",
    "DriveFile",
    "DriveFileList",
    "APP_DATA_FOLDER",
    "FILE_FIELDS",
    "JSON_MIME_TYPE",
]
