"""
Section schemas - Pydantic models for sections stored inside a note.

All sections of a note are stored together as a JSON array, which is the
content of the note's Drive file. The stored shape is the same as the
response shape.
"""

from types import MappingProxyType
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.utils import sanitize_labels, sanitize_map
from app.schemas.validation import check_labels, check_map, check_name


MESSAGES = MappingProxyType({
    "name.required": "name is required field",
    "name.notblank": "name can't be empty value",
    "name.max": "name must be less than 100 chars",
    "labels.max": "label count can't be more than 5",
    "labels.item.max": "label must be less than 20 chars",
    "metadata.max": "metadata count can't be more than 20",
    "metadata.item.max": "metadata key and value must be less than 20 and 100 chars respectively",
    "data.max": "data count can't be more than 50",
    "data.item.max": "data key and value must be less than 50 and 2000 chars respectively",
})


class WritableSection(BaseModel):
    """
    Schema for creating and updating a section.

    Example request body:
    {
        "name": "todo",
        "labels": ["daily"],
        "data": {"item1": "milk", "item2": "bread"}
    }
    """
    model_config = ConfigDict(validate_default=True)

    name: Optional[str] = ""
    labels: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    data: Optional[Dict[str, str]] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return check_name(value, MESSAGES)

    @field_validator("labels")
    @classmethod
    def _check_labels(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_labels(value, MESSAGES)

    @field_validator("metadata")
    @classmethod
    def _check_metadata(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        return check_map(value, MESSAGES, "metadata", 20, 20, 100)

    @field_validator("data")
    @classmethod
    def _check_data(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        return check_map(value, MESSAGES, "data", 50, 50, 2000)

    def sanitized(self) -> "WritableSection":
        """Return a copy with trimmed strings and blank labels/map keys dropped."""
        return self.model_copy(update={
            "name": (self.name or "").strip(),
            "labels": sanitize_labels(self.labels),
            "metadata": sanitize_map(self.metadata),
            "data": sanitize_map(self.data),
        })


class Section(BaseModel):
    """Full detail about a section. Empty fields are left out of JSON."""

    id: Optional[str] = None
    name: Optional[str] = None
    labels: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    data: Optional[Dict[str, str]] = None
