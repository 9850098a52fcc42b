"""
Notes router - note CRUD in the caller's Drive app-data folder.

This module provides REST endpoints for:
- Creating notes
- Listing all notes
- Getting, updating and deleting a single note

All endpoints require "Authorization: Bearer <Google access token>".
Empty fields are left out of the JSON responses.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from app.deps import get_notestore
from app.environments.base import ProviderError
from app.routers.errors import build_http_error, not_found
from app.schemas.note import Note, WritableNote
from app.services.notestore import Notestore

# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/api/v1/storage/notes", tags=["notes"])


def _note_not_found(note_id: str):
    return not_found(f"note with id '{note_id}' not found")


# ---------------------------------------------------------------------------
# CREATE / LIST
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=Note,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    payload: WritableNote,
    request: Request,
    response: Response,
    store: Notestore = Depends(get_notestore),
):
    """
    Create a note. The Location header points at the new note.
    """
    try:
        note = await store.create(payload)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "note creation error")

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{note.id}"
    return note


@router.get("", response_model=List[Note], response_model_exclude_none=True)
async def get_notes(store: Notestore = Depends(get_notestore)):
    try:
        return await store.get_all()
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "note retrival error")


# ---------------------------------------------------------------------------
# SINGLE NOTE
# ---------------------------------------------------------------------------

@router.get("/{note_id}", response_model=Note, response_model_exclude_none=True)
async def get_note(note_id: str, store: Notestore = Depends(get_notestore)):
    try:
        note = await store.get(note_id)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "note retrival error")

    if note is None:
        raise _note_not_found(note_id)
    return note


@router.put("/{note_id}", response_model=Note, response_model_exclude_none=True)
async def update_note(
    note_id: str,
    payload: WritableNote,
    store: Notestore = Depends(get_notestore),
):
    """Replace name, description, labels and metadata of a note."""
    try:
        note = await store.update(note_id, payload)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "note updation error")

    if note is None:
        raise _note_not_found(note_id)
    return note


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, store: Notestore = Depends(get_notestore)):
    """Delete a note together with all of its sections."""
    try:
        deleted = await store.delete(note_id)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "note deletion error")

    if not deleted:
        raise _note_not_found(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
