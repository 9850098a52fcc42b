"""
Section store - sections kept as a JSON array in the note's Drive file.

Every operation downloads the whole array, changes it in memory and, for
writes, uploads the whole array again:

    download -> decode -> locate by id -> mutate -> encode -> upload

There is no locking or versioning: when two clients write the same note
concurrently the last upload wins.
"""

import base64
import itertools
import logging
import os
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from app.core.utils import append_error
from app.environments.base import NotFoundError, ProviderError, StoreError, UnauthorizedError
from app.environments.google.drive import JSON_MIME_TYPE, GoogleDriveClient
from app.schemas.section import Section, WritableSection


logger = logging.getLogger("typing.services.sectionstore")

_SECTIONS = TypeAdapter(List[Section])
_STORED_SECTIONS = TypeAdapter(Optional[List[Section]])


# ---------------------------------------------------------------------------
# SECTION IDS
# ---------------------------------------------------------------------------
# 12 raw bytes: 4-byte unix time, 5 random bytes fixed per process and a
# 3-byte counter seeded randomly. Encoded as lowercase base32hex without
# padding, so ids are 20 chars and sort by creation second.

_PROCESS_RANDOM = os.urandom(5)
_COUNTER = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_section_id() -> str:
    timestamp = int(time.time()) & 0xFFFFFFFF
    count = next(_COUNTER) & 0xFFFFFF
    raw = timestamp.to_bytes(4, "big") + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return base64.b32hexencode(raw).decode("ascii").rstrip("=").lower()


# ---------------------------------------------------------------------------
# STORE
# ---------------------------------------------------------------------------

class Sectionstore(ABC):
    """Storage contract used by the sections router."""

    @abstractmethod
    async def create(self, note_id: str, section: WritableSection) -> Section:
        ...

    @abstractmethod
    async def get_all(self, note_id: str) -> List[Section]:
        ...

    @abstractmethod
    async def get(self, note_id: str, section_id: str) -> Section:
        ...

    @abstractmethod
    async def update(self, note_id: str, section_id: str, section: WritableSection) -> Section:
        ...

    @abstractmethod
    async def delete(self, note_id: str, section_id: str) -> None:
        ...


def _section_not_found(section_id: str) -> NotFoundError:
    return NotFoundError(f"section with id '{section_id}' not found")


def _locate(sections: List[Section], section_id: str) -> int:
    for index, section in enumerate(sections):
        if section.id == section_id:
            return index
    raise _section_not_found(section_id)


def _to_section(section_id: str, section: WritableSection) -> Section:
    return Section(
        id=section_id,
        name=section.name or None,
        labels=section.labels or None,
        metadata=section.metadata or None,
        data=section.data or None,
    )


class DriveSectionstore(Sectionstore):
    """Sections stored as the content of the note's Drive file."""

    def __init__(self, drive: GoogleDriveClient):
        self.drive = drive

    # -------------------------------------------------------------------------
    # DOCUMENT I/O
    # -------------------------------------------------------------------------

    def _wrap(self, note_id: str, message: str, err: ProviderError) -> ProviderError:
        if isinstance(err, UnauthorizedError):
            return err
        if isinstance(err, NotFoundError):
            return NotFoundError(f"note with id '{note_id}' not found")
        return StoreError(append_error(message, err))

    async def _download(self, note_id: str) -> List[Section]:
        try:
            content = await self.drive.download(note_id)
        except ProviderError as e:
            raise self._wrap(note_id, "error on downloading sections", e) from e

        if not content.strip():
            return []

        try:
            # a JSON null is an empty array
            return _STORED_SECTIONS.validate_json(content) or []
        except ValidationError as e:
            raise StoreError(append_error("error on unmarshalling sections", e)) from e

    async def _upload(self, note_id: str, sections: List[Section]) -> None:
        content = _SECTIONS.dump_json(sections, exclude_none=True)
        try:
            await self.drive.upload(note_id, content, mime_type=JSON_MIME_TYPE)
        except ProviderError as e:
            raise self._wrap(note_id, "error on uploading sections", e) from e

    async def _load(self, note_id: str, section_id: str) -> Tuple[List[Section], int]:
        sections = await self._download(note_id)
        return sections, _locate(sections, section_id)

    # -------------------------------------------------------------------------
    # OPERATIONS
    # -------------------------------------------------------------------------

    async def create(self, note_id: str, section: WritableSection) -> Section:
        sections = await self._download(note_id)

        created = _to_section(new_section_id(), section.sanitized())
        sections.append(created)
        await self._upload(note_id, sections)

        logger.info(f"Section {created.id} created in note {note_id}")
        return created

    async def get_all(self, note_id: str) -> List[Section]:
        return await self._download(note_id)

    async def get(self, note_id: str, section_id: str) -> Section:
        sections, index = await self._load(note_id, section_id)
        return sections[index]

    async def update(self, note_id: str, section_id: str, section: WritableSection) -> Section:
        sections, index = await self._load(note_id, section_id)

        updated = _to_section(section_id, section.sanitized())
        sections[index] = updated
        await self._upload(note_id, sections)

        logger.info(f"Section {section_id} updated in note {note_id}")
        return updated

    async def delete(self, note_id: str, section_id: str) -> None:
        """Remove a section; the last section takes its place in the array."""
        sections, index = await self._load(note_id, section_id)

        sections[index] = sections[-1]
        sections.pop()
        await self._upload(note_id, sections)

        logger.info(f"Section {section_id} deleted from note {note_id}")
