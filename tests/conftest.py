"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- DriveBackend: an in-memory Drive v3 served through httpx.MockTransport,
  used by the adapter tests (Google is never contacted)
- In-memory fakes of the adapters, registered in an instance container
- Test client (FastAPI TestClient) built around that container
"""

import itertools
import json
from datetime import datetime, timezone
from typing import Dict, Generator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.container import Container, InstanceType
from app.environments.base import (
    AuthenticationError,
    AuthProvider,
    NotFoundError,
    TokenExpiredError,
    UserinfoService,
)
from app.main import create_app
from app.schemas.auth import Token
from app.schemas.note import Note, WritableNote
from app.schemas.section import Section, WritableSection
from app.schemas.user import User
from app.services.notestore import Notestore
from app.services.sectionstore import Sectionstore, new_section_id


VALID_TOKEN = "valid-token"


# ---------------------------------------------------------------------------
# IN-MEMORY DRIVE
# ---------------------------------------------------------------------------

class DriveBackend:
    """
    Minimal Drive v3 files resource backed by a dict.

    Only requests carrying "Bearer valid-token" are accepted; anything else
    answers 401 like Drive does for an expired token.
    """

    PAGE_SIZE = 2

    def __init__(self):
        self.files: Dict[str, dict] = {}
        self.contents: Dict[str, bytes] = {}
        self.requests: List[httpx.Request] = []
        self._ids = itertools.count(1)

    # helpers used by tests -------------------------------------------------

    def add_file(self, name: str, content: bytes = b"", **extra) -> str:
        file_id = f"file-{next(self._ids)}"
        now = datetime.now(timezone.utc).isoformat()
        self.files[file_id] = {
            "id": file_id,
            "name": name,
            "properties": {},
            "createdTime": now,
            "modifiedTime": now,
            **extra,
        }
        self.contents[file_id] = content
        return file_id

    def client(self, token: str = VALID_TOKEN) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            headers={"Authorization": f"Bearer {token}"},
        )

    def uploads(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith("/upload/")]

    # transport ---------------------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
            return httpx.Response(401, json={"error": {"code": 401, "message": "Invalid Credentials"}})

        path = request.url.path
        if path.startswith("/upload/drive/v3/files/"):
            return self._upload(path.rsplit("/", 1)[1], request)
        if path == "/drive/v3/files":
            if request.method == "POST":
                return self._create(json.loads(request.content))
            return self._list(request.url.params.get("pageToken"))
        if path.startswith("/drive/v3/files/"):
            return self._file(path.rsplit("/", 1)[1], request)
        return httpx.Response(400, json={"error": "unexpected path"})

    def _not_found(self, file_id: str) -> httpx.Response:
        return httpx.Response(404, json={"error": {"code": 404, "message": f"File not found: {file_id}."}})

    def _create(self, body: dict) -> httpx.Response:
        extra = {}
        if body.get("description") is not None:
            extra["description"] = body["description"]
        file_id = self.add_file(body["name"], **extra)
        self.files[file_id]["properties"] = {
            k: v for k, v in (body.get("properties") or {}).items() if v is not None
        }
        self.files[file_id]["parents"] = body.get("parents")
        return httpx.Response(200, json=self.files[file_id])

    def _list(self, page_token: Optional[str]) -> httpx.Response:
        offset = int(page_token or 0)
        files = list(self.files.values())
        page = {"files": files[offset:offset + self.PAGE_SIZE]}
        if offset + self.PAGE_SIZE < len(files):
            page["nextPageToken"] = str(offset + self.PAGE_SIZE)
        return httpx.Response(200, json=page)

    def _file(self, file_id: str, request: httpx.Request) -> httpx.Response:
        if file_id not in self.files:
            return self._not_found(file_id)

        if request.method == "GET":
            if request.url.params.get("alt") == "media":
                return httpx.Response(200, content=self.contents[file_id])
            return httpx.Response(200, json=self.files[file_id])

        if request.method == "PATCH":
            body = json.loads(request.content)
            file = self.files[file_id]
            for key in ("name", "description"):
                if key in body:
                    if body[key] is None:
                        file.pop(key, None)
                    else:
                        file[key] = body[key]
            for key, value in (body.get("properties") or {}).items():
                if value is None:
                    file["properties"].pop(key, None)
                else:
                    file["properties"][key] = value
            file["modifiedTime"] = datetime.now(timezone.utc).isoformat()
            return httpx.Response(200, json=file)

        if request.method == "DELETE":
            del self.files[file_id]
            self.contents.pop(file_id, None)
            return httpx.Response(204)

        return httpx.Response(405)

    def _upload(self, file_id: str, request: httpx.Request) -> httpx.Response:
        if file_id not in self.files:
            return self._not_found(file_id)
        self.contents[file_id] = request.content
        return httpx.Response(200, json=self.files[file_id])


@pytest.fixture
def drive_backend() -> DriveBackend:
    return DriveBackend()


# ---------------------------------------------------------------------------
# ADAPTER FAKES
# ---------------------------------------------------------------------------

class FakeAuth(AuthProvider):
    """Accepts the code "good-code" and the refresh token "good-refresh"."""

    provider_name = "fake"

    def __init__(self):
        self.revoked: List[str] = []

    def get_authorization_url(self, redirect_uri=None, state=None) -> str:
        return f"https://accounts.example.com/auth?redirect_uri={redirect_uri or ''}&state={state or '0'}"

    async def exchange_code_for_tokens(self, code, redirect_uri=None) -> Token:
        if code != "good-code":
            raise AuthenticationError("Token exchange failed: invalid_grant")
        return Token(access_token=VALID_TOKEN, refresh_token="good-refresh", expiry=datetime(2030, 1, 1, tzinfo=timezone.utc))

    async def refresh_access_token(self, refresh_token) -> Token:
        if refresh_token != "good-refresh":
            raise TokenExpiredError("Token refresh failed: invalid_grant")
        return Token(access_token="renewed-token", refresh_token=refresh_token)

    async def revoke_token(self, token) -> None:
        if token != VALID_TOKEN:
            raise AuthenticationError("access token revocation failed with '400' status code")
        self.revoked.append(token)


class FakeUserinfo(UserinfoService):
    async def get(self) -> User:
        return User(id="42", name="Jane Doe", email="jane@example.com", picture="https://example.com/p.png")


class FakeNotestore(Notestore):
    def __init__(self):
        self.notes: Dict[str, Note] = {}
        self._ids = itertools.count(1)

    async def create(self, note: WritableNote) -> Note:
        note = note.sanitized()
        created = Note(
            id=f"note-{next(self._ids)}",
            name=note.name,
            description=note.description or None,
            labels=note.labels or None,
            metadata=note.metadata or None,
            date_created=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        self.notes[created.id] = created
        return created

    async def get_all(self) -> List[Note]:
        return list(self.notes.values())

    async def get(self, note_id: str) -> Optional[Note]:
        return self.notes.get(note_id)

    async def update(self, note_id: str, note: WritableNote) -> Optional[Note]:
        if note_id not in self.notes:
            return None
        note = note.sanitized()
        updated = self.notes[note_id].model_copy(update={
            "name": note.name,
            "description": note.description or None,
            "labels": note.labels or None,
            "metadata": note.metadata or None,
        })
        self.notes[note_id] = updated
        return updated

    async def delete(self, note_id: str) -> bool:
        return self.notes.pop(note_id, None) is not None


class FakeSectionstore(Sectionstore):
    """Sections per note id; only "note-1" exists."""

    def __init__(self):
        self.sections: Dict[str, List[Section]] = {"note-1": []}

    def _note(self, note_id: str) -> List[Section]:
        if note_id not in self.sections:
            raise NotFoundError(f"note with id '{note_id}' not found")
        return self.sections[note_id]

    def _index(self, note_id: str, section_id: str) -> int:
        for index, section in enumerate(self._note(note_id)):
            if section.id == section_id:
                return index
        raise NotFoundError(f"section with id '{section_id}' not found")

    async def create(self, note_id: str, section: WritableSection) -> Section:
        section = section.sanitized()
        created = Section(id=new_section_id(), name=section.name, data=section.data or None)
        self._note(note_id).append(created)
        return created

    async def get_all(self, note_id: str) -> List[Section]:
        return list(self._note(note_id))

    async def get(self, note_id: str, section_id: str) -> Section:
        return self._note(note_id)[self._index(note_id, section_id)]

    async def update(self, note_id: str, section_id: str, section: WritableSection) -> Section:
        index = self._index(note_id, section_id)
        section = section.sanitized()
        updated = Section(id=section_id, name=section.name, data=section.data or None)
        self.sections[note_id][index] = updated
        return updated

    async def delete(self, note_id: str, section_id: str) -> None:
        index = self._index(note_id, section_id)
        self.sections[note_id].pop(index)


# ---------------------------------------------------------------------------
# APP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def notestore() -> FakeNotestore:
    return FakeNotestore()


@pytest.fixture
def sectionstore() -> FakeSectionstore:
    return FakeSectionstore()


@pytest.fixture
def fake_auth() -> FakeAuth:
    return FakeAuth()


@pytest.fixture
def container(fake_auth, notestore, sectionstore) -> Container:
    """Container whose activators hand out the in-memory fakes."""
    container = Container()
    container.add(InstanceType.AUTH, lambda: fake_auth)
    container.add(InstanceType.USERINFO, lambda http_client: FakeUserinfo())
    container.add(InstanceType.NOTESTORE, lambda http_client: notestore)
    container.add(InstanceType.SECTIONSTORE, lambda http_client: sectionstore)
    return container


@pytest.fixture
def client(container: Container) -> Generator[TestClient, None, None]:
    """Create a test client around the fake container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
