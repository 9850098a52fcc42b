"""
Sections router - CRUD on the sections stored inside a note.

Every endpoint reads the note's whole section array from Drive; writes
upload the whole array back. A missing note or section answers 404.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from app.deps import get_sectionstore
from app.environments.base import ProviderError
from app.routers.errors import build_http_error
from app.schemas.section import Section, WritableSection
from app.services.sectionstore import Sectionstore

router = APIRouter(prefix="/api/v1/storage/notes/{note_id}/sections", tags=["sections"])


@router.post(
    "",
    response_model=Section,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_section(
    note_id: str,
    payload: WritableSection,
    request: Request,
    response: Response,
    store: Sectionstore = Depends(get_sectionstore),
):
    try:
        section = await store.create(note_id, payload)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "section creation error")

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{section.id}"
    return section


@router.get("", response_model=List[Section], response_model_exclude_none=True)
async def get_sections(note_id: str, store: Sectionstore = Depends(get_sectionstore)):
    try:
        return await store.get_all(note_id)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "section retrival error")


@router.get("/{section_id}", response_model=Section, response_model_exclude_none=True)
async def get_section(
    note_id: str,
    section_id: str,
    store: Sectionstore = Depends(get_sectionstore),
):
    try:
        return await store.get(note_id, section_id)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "section retrival error")


@router.put("/{section_id}", response_model=Section, response_model_exclude_none=True)
async def update_section(
    note_id: str,
    section_id: str,
    payload: WritableSection,
    store: Sectionstore = Depends(get_sectionstore),
):
    try:
        return await store.update(note_id, section_id, payload)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "section updation error")


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section(
    note_id: str,
    section_id: str,
    store: Sectionstore = Depends(get_sectionstore),
):
    try:
        await store.delete(note_id, section_id)
    except (ProviderError, ValueError) as e:
        raise build_http_error(e, "section deletion error")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
