"""
Note schemas - Pydantic models for note create/update requests and responses.

A note is backed by one Drive file in the app-data folder. The JSON field
names ("desc", "dateCreated", ...) are the public API; Python code uses the
snake_case attribute names.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.utils import sanitize_labels, sanitize_map
from app.schemas.validation import check_labels, check_map, check_name, check_text


MESSAGES = MappingProxyType({
    "name.required": "name is required field",
    "name.notblank": "name can't be empty value",
    "name.max": "name must be less than 100 chars",
    "desc.max": "desc must be less than 250 chars",
    "labels.max": "label count can't be more than 5",
    "labels.item.max": "label must be less than 20 chars",
    "metadata.max": "metadata count can't be more than 20",
    "metadata.item.max": "metadata key and value must be less than 20 and 100 chars respectively",
})


# ---------------------------------------------------------------------------
# REQUEST SCHEMAS
# ---------------------------------------------------------------------------

class WritableNote(BaseModel):
    """
    Schema for creating and updating a note.

    Example request body:
    {
        "name": "groceries",
        "desc": "weekly list",
        "labels": ["home"],
        "metadata": {"color": "green"}
    }
    """
    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    name: Optional[str] = ""
    description: Optional[str] = Field(None, alias="desc")
    labels: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return check_name(value, MESSAGES)

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: Optional[str]) -> Optional[str]:
        return check_text(value, MESSAGES, "desc", 250)

    @field_validator("labels")
    @classmethod
    def _check_labels(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_labels(value, MESSAGES)

    @field_validator("metadata")
    @classmethod
    def _check_metadata(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        return check_map(value, MESSAGES, "metadata", 20, 20, 100)

    def sanitized(self) -> "WritableNote":
        """Return a copy with trimmed strings and blank labels/metadata keys dropped."""
        return self.model_copy(update={
            "name": (self.name or "").strip(),
            "description": (self.description or "").strip(),
            "labels": sanitize_labels(self.labels),
            "metadata": sanitize_map(self.metadata),
        })


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class Note(BaseModel):
    """
    Full detail about a note. Empty fields are left out of responses.

    Example response:
    {
        "id": "1Zx9...",
        "name": "groceries",
        "desc": "weekly list",
        "labels": ["home"],
        "metadata": {"color": "green"},
        "dateCreated": "2024-01-01T10:00:00Z",
        "dateUpdated": "2024-01-02T08:30:00Z"
    }
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = Field(None, alias="desc")
    labels: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    date_updated: Optional[datetime] = Field(None, alias="dateUpdated")
