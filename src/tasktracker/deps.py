"""Reusable FastAPI dependencies."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .db.session import get_session
from .services import AccessGuard, AuthenticatedIdentity, CredentialService, TaskService

logger = logging.getLogger(__name__)


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields a database session."""

    async for session in get_session(request):
        yield session


SettingsDependency = Annotated[Settings, Depends(get_settings)]
DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def get_credential_service(
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
) -> CredentialService:
    return CredentialService(session, settings)


def get_task_service(session: DatabaseSessionDependency) -> TaskService:
    return TaskService(session)


def get_access_guard(settings: SettingsDependency) -> AccessGuard:
    return AccessGuard(settings)


async def require_identity(
    request: Request,
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedIdentity:
    """Reject the request unless it carries a valid bearer token."""

    identity = guard.authenticate(authorization)
    request.state.identity = identity
    return identity


IdentityDependency = Annotated[AuthenticatedIdentity, Depends(require_identity)]


async def log_authenticated_request(
    request: Request,
    identity: IdentityDependency,
) -> AsyncIterator[None]:
    """Log who called which route before and after the handler runs."""

    context = {
        "username": identity.username,
        "method": request.method,
        "path": request.url.path,
    }
    logger.info("Authenticated request received", extra=context)
    yield
    logger.info("Response sent for authenticated request", extra=context)


CredentialServiceDependency = Annotated[CredentialService, Depends(get_credential_service)]
TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]


__all__ = [
    "CredentialServiceDependency",
    "DatabaseSessionDependency",
    "IdentityDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "get_access_guard",
    "get_credential_service",
    "get_db_session",
    "get_task_service",
    "log_authenticated_request",
    "require_identity",
]
