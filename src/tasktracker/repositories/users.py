"""Repository for interacting with user persistence models."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Key-unique lookups for ``User`` records. Misses return ``None``."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Return a user matching the supplied email if it exists."""
        result = await self.session.exec(select(User).where(User.email == email))
        return result.one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        """Return a user matching the supplied username if it exists."""
        result = await self.session.exec(select(User).where(User.username == username))
        return result.one_or_none()
