"""Domain service layer package."""

from __future__ import annotations

from .auth import CredentialService
from .guard import AccessGuard, AuthenticatedIdentity
from .tasks import TaskService

__all__ = ["AccessGuard", "AuthenticatedIdentity", "CredentialService", "TaskService"]
