"""Bearer-token gate for protected routes."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from ..core.config import Settings
from ..core.security import ExpiredSignatureError, JWTError, TokenIssuer
from ..errors import UnauthorizedError
from ..schemas.auth import TokenPayload

BEARER_SCHEME = "bearer"


@dataclass(slots=True, frozen=True)
class AuthenticatedIdentity:
    """Identity decoded from a verified access token."""

    user_id: int
    username: str


class AccessGuard:
    """Validates ``Authorization: Bearer <token>`` headers.

    The guard is binary: a token that verifies yields an identity, anything
    else raises ``UnauthorizedError``. No user lookup and no role checks.
    """

    def __init__(self, settings: Settings, *, issuer: TokenIssuer | None = None) -> None:
        self._issuer = issuer or TokenIssuer(settings)

    @staticmethod
    def extract_token(authorization: str | None) -> str:
        if authorization is None or not authorization.strip():
            raise UnauthorizedError("Not authenticated.")
        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
            raise UnauthorizedError("Invalid authorization header.")
        return parts[1]

    def authenticate(self, authorization: str | None) -> AuthenticatedIdentity:
        """Return the identity carried by the header's token."""
        token = self.extract_token(authorization)
        try:
            claims = self._issuer.verify(token)
        except ExpiredSignatureError as exc:
            raise UnauthorizedError("Token has expired.") from exc
        except JWTError as exc:
            raise UnauthorizedError() from exc

        try:
            payload = TokenPayload.model_validate(claims)
            user_id = int(payload.sub)
        except (ValidationError, ValueError) as exc:
            raise UnauthorizedError() from exc

        return AuthenticatedIdentity(user_id=user_id, username=payload.username)


__all__ = ["AccessGuard", "AuthenticatedIdentity"]
