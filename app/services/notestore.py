"""
Note store - note CRUD on top of the Drive app-data folder.

Every note is one Drive file:
- file name is "<note name>.json"
- file description is the note description
- file property "labels" holds the labels joined with ","
- file property "meta!<key>" holds the metadata value for <key>
- createdTime/modifiedTime become dateCreated/dateUpdated

The file content is owned by the section store.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.core.utils import append_error
from app.environments.base import NotFoundError, ProviderError, StoreError, UnauthorizedError
from app.environments.google.drive import (
    APP_DATA_FOLDER,
    JSON_MIME_TYPE,
    DriveFile,
    GoogleDriveClient,
)
from app.schemas.note import Note, WritableNote


logger = logging.getLogger("typing.services.notestore")

FILE_SUFFIX = ".json"
LABELS_PROPERTY = "labels"
LABELS_SEPARATOR = ","
META_PREFIX = "meta!"


class Notestore(ABC):
    """Storage contract used by the notes router."""

    @abstractmethod
    async def create(self, note: WritableNote) -> Note:
        ...

    @abstractmethod
    async def get_all(self) -> List[Note]:
        ...

    @abstractmethod
    async def get(self, note_id: str) -> Optional[Note]:
        """Return the note, or None when it doesn't exist."""

    @abstractmethod
    async def update(self, note_id: str, note: WritableNote) -> Optional[Note]:
        """Return the updated note, or None when it doesn't exist."""

    @abstractmethod
    async def delete(self, note_id: str) -> bool:
        """Return False when the note doesn't exist."""


# ---------------------------------------------------------------------------
# DRIVE MAPPING
# ---------------------------------------------------------------------------

def file_to_note(file: DriveFile) -> Note:
    """Convert a Drive file resource into a note, leaving empty fields unset."""
    name = file.name
    if name.endswith(FILE_SUFFIX):
        name = name[:-len(FILE_SUFFIX)]

    properties = file.properties or {}
    labels = [
        label for label in properties.get(LABELS_PROPERTY, "").split(LABELS_SEPARATOR) if label
    ]
    metadata = {
        key[len(META_PREFIX):]: value
        for key, value in properties.items()
        if key.startswith(META_PREFIX)
    }

    return Note(
        id=file.id or None,
        name=name or None,
        description=file.description or None,
        labels=labels or None,
        metadata=metadata or None,
        date_created=file.created_time,
        date_updated=file.modified_time,
    )


def note_properties(note: WritableNote) -> Dict[str, Optional[str]]:
    properties: Dict[str, Optional[str]] = {}
    if note.labels:
        properties[LABELS_PROPERTY] = LABELS_SEPARATOR.join(note.labels)
    for key, value in (note.metadata or {}).items():
        properties[META_PREFIX + key] = value
    return properties


def _check_id(note_id: str) -> None:
    if not note_id:
        raise ValueError("note id is nil")


def _wrap(message: str, err: ProviderError) -> ProviderError:
    # Unauthorized errors reach the router untouched so they map to 401
    if isinstance(err, UnauthorizedError):
        return err
    return StoreError(append_error(message, err))


# ---------------------------------------------------------------------------
# DRIVE IMPLEMENTATION
# ---------------------------------------------------------------------------

class DriveNotestore(Notestore):
    """
    Notes stored as files in the caller's Drive app-data folder.

    The store is bound to one token-scoped Drive client and lives for a
    single request.
    """

    def __init__(self, drive: GoogleDriveClient):
        self.drive = drive

    async def create(self, note: WritableNote) -> Note:
        note = note.sanitized()
        body: Dict[str, Any] = {
            "name": note.name + FILE_SUFFIX,
            "mimeType": JSON_MIME_TYPE,
            "parents": [APP_DATA_FOLDER],
            "properties": note_properties(note),
        }
        if note.description:
            body["description"] = note.description

        try:
            file = await self.drive.create_file(body)
        except ProviderError as e:
            raise _wrap("error on creating note", e) from e

        logger.info(f"Note {file.id} created")
        return file_to_note(file)

    async def get_all(self) -> List[Note]:
        notes: List[Note] = []
        page_token: Optional[str] = None

        while True:
            try:
                page = await self.drive.list_files(page_token)
            except ProviderError as e:
                raise _wrap("error on listing notes", e) from e

            notes.extend(file_to_note(file) for file in page.files)
            page_token = page.next_page_token
            if not page_token:
                break

        logger.debug(f"Listed {len(notes)} notes")
        return notes

    async def get(self, note_id: str) -> Optional[Note]:
        _check_id(note_id)
        try:
            file = await self.drive.get_file(note_id)
        except NotFoundError:
            return None
        except ProviderError as e:
            raise _wrap(f"error on getting note '{note_id}'", e) from e

        return file_to_note(file)

    async def update(self, note_id: str, note: WritableNote) -> Optional[Note]:
        """
        Replace name, description, labels and metadata of a note.

        Fields that are now empty are sent as null so Drive removes them,
        including metadata keys that are no longer present.
        """
        _check_id(note_id)
        existing = await self.get(note_id)
        if existing is None:
            return None

        note = note.sanitized()
        properties = note_properties(note)
        if LABELS_PROPERTY not in properties:
            properties[LABELS_PROPERTY] = None
        for key in existing.metadata or {}:
            if key not in (note.metadata or {}):
                properties[META_PREFIX + key] = None

        body: Dict[str, Any] = {
            "name": note.name + FILE_SUFFIX,
            "description": note.description or None,
            "properties": properties,
        }

        try:
            file = await self.drive.update_file(note_id, body)
        except NotFoundError:
            return None
        except ProviderError as e:
            raise _wrap(f"error on updating note '{note_id}'", e) from e

        logger.info(f"Note {note_id} updated")
        return file_to_note(file)

    async def delete(self, note_id: str) -> bool:
        _check_id(note_id)
        try:
            await self.drive.delete_file(note_id)
        except NotFoundError:
            return False
        except ProviderError as e:
            raise _wrap(f"error on deleting note '{note_id}'", e) from e

        logger.info(f"Note {note_id} deleted")
        return True
