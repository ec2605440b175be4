"""Credential workflows: registration, login and password reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings
from ..core.security import GeneratedToken, PasswordHasher, TokenIssuer
from ..errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from ..models import User
from ..repositories import UserRepository

logger = logging.getLogger(__name__)

MIN_RESET_PASSWORD_LENGTH = 6


@dataclass(slots=True)
class RegistrationResult:
    message: str
    user: User


@dataclass(slots=True)
class LoginResult:
    message: str
    name: str
    access_token: GeneratedToken


class CredentialService:
    """Owns the user identity lifecycle.

    Every dependency is built from the ``Settings`` handed to the constructor,
    so the signing secret and hash cost never come from module globals.
    """

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings,
        *,
        hasher: PasswordHasher | None = None,
        issuer: TokenIssuer | None = None,
    ) -> None:
        self._session = session
        self._settings = settings
        self._repository = UserRepository(session)
        self._hasher = hasher or PasswordHasher(settings)
        self._issuer = issuer or TokenIssuer(settings)

    async def register(
        self,
        *,
        email: str,
        name: str,
        username: str,
        password: str,
    ) -> RegistrationResult:
        """Create a user after checking that email and username are unused.

        Email is checked before username, so a request colliding on both
        reports the email conflict.
        """
        if await self._repository.get_by_email(email) is not None:
            raise ConflictError("User already exists with this email")
        if await self._repository.get_by_username(username) is not None:
            raise ConflictError("Username is already taken")

        hashed_password = await self._hasher.hash(password)
        user = User(
            email=email,
            name=name,
            username=username,
            hashed_password=hashed_password,
        )
        await self._repository.add(user)
        await self._session.commit()
        await self._repository.refresh(user)

        logger.info("User registered", extra={"user_id": user.id, "username": user.username})
        return RegistrationResult(message="User created successfully!", user=user)

    async def login(self, *, email: str, password: str) -> LoginResult:
        user = await self._repository.get_by_email(email)
        if user is None:
            logger.info("Login rejected: unknown email")
            raise UnauthorizedError("User Not Found")

        if not await self._hasher.verify(password, user.hashed_password):
            logger.info("Login rejected: invalid password", extra={"user_id": user.id})
            raise UnauthorizedError("Invalid Password")

        token = self._issuer.sign(subject=user.id, username=user.username)

        logger.info("User logged in", extra={"user_id": user.id, "username": user.username})
        return LoginResult(message="Login successful", name=user.name, access_token=token)

    async def reset_password(
        self,
        *,
        email: str,
        old_password: str,
        new_password: str | None,
    ) -> str:
        """Replace the stored hash once the old password has been confirmed.

        The old password is verified before the length policy is applied.
        Tokens issued earlier remain valid until they expire.
        """
        user = await self._repository.get_by_email(email)
        if user is None:
            raise NotFoundError("No user found with this email")

        if not await self._hasher.verify(old_password, user.hashed_password):
            logger.info("Password reset rejected: old password mismatch", extra={"user_id": user.id})
            raise UnauthorizedError("Old password is incorrect")

        if not new_password or len(new_password) < MIN_RESET_PASSWORD_LENGTH:
            raise BadRequestError(
                f"New password must be at least {MIN_RESET_PASSWORD_LENGTH} characters long"
            )

        user.hashed_password = await self._hasher.hash(new_password)
        self._session.add(user)
        await self._session.commit()

        logger.info("Password changed", extra={"user_id": user.id})
        return "Password changed successfully!"


__all__ = ["CredentialService", "LoginResult", "MIN_RESET_PASSWORD_LENGTH", "RegistrationResult"]
