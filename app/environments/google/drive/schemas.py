"""
Google Drive Schemas - Data structures for Drive v3 file resources.

Only the fields the note store asks for are modelled. Drive returns
camelCase keys; aliases map them onto snake_case attributes.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Fields requested on every file call
FILE_FIELDS = "id, name, description, properties, createdTime, modifiedTime"

APP_DATA_FOLDER = "appDataFolder"

JSON_MIME_TYPE = "application/json"


class DriveFile(BaseModel):
    """
    A Drive file resource.

    Example from Drive:
    {
        "id": "1Zx9...",
        "name": "groceries.json",
        "description": "weekly list",
        "properties": {"labels": "home,food", "meta!color": "green"},
        "createdTime": "2024-01-01T10:00:00.000Z",
        "modifiedTime": "2024-01-02T08:30:00.000Z"
    }
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str = ""
    description: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)
    created_time: Optional[datetime] = Field(None, alias="createdTime")
    modified_time: Optional[datetime] = Field(None, alias="modifiedTime")


class DriveFileList(BaseModel):
    """One page of a files.list response."""
    model_config = ConfigDict(populate_by_name=True)

    files: List[DriveFile] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(None, alias="nextPageToken")
