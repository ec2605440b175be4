"""Security helpers for password hashing and JWT token management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from .config import Settings


@dataclass(slots=True)
class GeneratedToken:
    """Represents a generated JWT token with associated metadata."""

    token: str
    expires_at: datetime


class PasswordHasher:
    """bcrypt hashing whose CPU-bound work runs in the threadpool.

    The cost factor comes from ``Settings.password_hash_rounds``.
    """

    def __init__(self, settings: Settings) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.password_hash_rounds,
        )

    def hash_sync(self, password: str) -> str:
        return self._context.hash(password)

    def verify_sync(self, plain_password: str, hashed_password: str) -> bool:
        return self._context.verify(plain_password, hashed_password)

    async def hash(self, password: str) -> str:
        """Return a salted one-way hash of ``password``."""

        return await run_in_threadpool(self.hash_sync, password)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Check ``plain_password`` against ``hashed_password``."""

        return await run_in_threadpool(self.verify_sync, plain_password, hashed_password)


class TokenIssuer:
    """Signs and verifies access tokens with the configured secret and algorithm."""

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(minutes=settings.access_token_expire_minutes)

    def sign(
        self,
        *,
        subject: str | int,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> GeneratedToken:
        """Create a signed token carrying ``sub`` and ``username`` claims."""

        now = datetime.now(timezone.utc)
        expire = now + (self._lifetime if expires_delta is None else expires_delta)
        payload: dict[str, Any] = {
            "sub": str(subject),
            "username": username,
            "iat": now,
            "exp": expire,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return GeneratedToken(token=token, expires_at=expire)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode ``token`` after checking its signature and expiry.

        Raises ``ExpiredSignatureError`` for expired tokens and ``JWTError``
        for anything else that fails verification.
        """

        return jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require_exp": True, "require_sub": True},
        )


__all__ = [
    "ExpiredSignatureError",
    "GeneratedToken",
    "JWTError",
    "PasswordHasher",
    "TokenIssuer",
]
