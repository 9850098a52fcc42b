"""
Main application entry point - FastAPI app factory and configuration.

The app is built by create_app(), which takes the instance container the
routers draw their adapters from. Run with:

    python -m app
    uvicorn app.main:create_app --factory --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.container import Container, InstanceType
from app.environments.google.auth import GoogleAuthClient, GoogleAuthConfig, load_client_config
from app.environments.google.drive import GoogleDriveClient
from app.environments.google.userinfo import GoogleUserinfoClient
from app.routers import auth, notes, sections, userinfo, version
from app.schemas.validation import translate_errors
from app.services.notestore import DriveNotestore
from app.services.sectionstore import DriveSectionstore


logger = logging.getLogger("typing.main")


# ---------------------------------------------------------------------------
# INSTANCE CONTAINER
# ---------------------------------------------------------------------------

def build_container(auth_config: GoogleAuthConfig) -> Container:
    """
    Register the Google-backed activators.

    AUTH takes no parameters; the other types take the token-scoped
    httpx.AsyncClient created for the request.
    """
    container = Container()
    container.add(InstanceType.AUTH, lambda: GoogleAuthClient(auth_config))
    container.add(InstanceType.USERINFO, GoogleUserinfoClient)
    container.add(
        InstanceType.NOTESTORE,
        lambda http_client: DriveNotestore(GoogleDriveClient(http_client)),
    )
    container.add(
        InstanceType.SECTIONSTORE,
        lambda http_client: DriveSectionstore(GoogleDriveClient(http_client)),
    )
    return container


# ---------------------------------------------------------------------------
# EXCEPTION HANDLERS
# ---------------------------------------------------------------------------
# Every error body has the same shape: {"message": "..."}

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    msg = translate_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path}: {msg}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": msg})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path}: unhandled error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "internal server error"},
    )


# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------

def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: Activators for the adapters. When omitted, one is built
            from the client credential file named by TYPING_CLIENT_CRED.
    """
    if container is None:
        container = build_container(load_client_config(settings.CLIENT_CRED))

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.container = container

    # Local clients (browser apps on localhost) call the API cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -----------------------------------------------------------------------
    # REGISTER ROUTERS
    # -----------------------------------------------------------------------
    # version.router:  /api/version
    # auth.router:     /api/v1/signin/auth/{url,token,refresh,revoke}
    # userinfo.router: /api/v1/signin/userinfo
    # notes.router:    /api/v1/storage/notes[/{note_id}]
    # sections.router: /api/v1/storage/notes/{note_id}/sections[/{section_id}]
    app.include_router(version.router)
    app.include_router(auth.router)
    app.include_router(userinfo.router)
    app.include_router(notes.router)
    app.include_router(sections.router)

    return app
