"""Schemas describing authentication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from .user import UserPublic


class CamelModel(BaseModel):
    """Accept and emit camelCase keys while keeping snake_case attributes.

    Unknown keys are rejected with a validation error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class RegisterRequest(CamelModel):
    """Incoming payload for registering a new user.

    There is deliberately no password length rule here; the six character
    minimum only applies when resetting a password.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "username": "ada",
                "email": "ada@example.com",
                "password": "analytical",
            }
        }
    )

    name: str = Field(min_length=1, max_length=255)
    username: str = Field(min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ResetPasswordRequest(CamelModel):
    """Payload for changing a password after re-authenticating with the old one."""

    email: EmailStr
    old_password: str = Field(min_length=1)
    new_password: str | None = None


class RegisterResponse(CamelModel):
    message: str
    user: UserPublic


class LoginResponse(CamelModel):
    """Response for a successful login."""

    message: str
    name: str
    access_token: str


class TokenPayload(BaseModel):
    """Validated JWT claims."""

    model_config = ConfigDict(extra="ignore")

    sub: str
    username: str
    exp: datetime
    iat: datetime | None = None


__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ResetPasswordRequest",
    "TokenPayload",
]
