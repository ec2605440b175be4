"""Routes handling registration, login and password reset."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import CredentialServiceDependency
from ...schemas import (
    HealthCheckResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UserPublic,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "/status",
    response_model=HealthCheckResponse,
    summary="Authentication subsystem status",
)
async def read_status() -> HealthCheckResponse:
    return HealthCheckResponse(status="ok")


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register(
    payload: RegisterRequest,
    service: CredentialServiceDependency,
) -> RegisterResponse:
    result = await service.register(
        email=payload.email,
        name=payload.name,
        username=payload.username,
        password=payload.password,
    )
    return RegisterResponse(message=result.message, user=UserPublic.model_validate(result.user))


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate using email and password",
)
async def login(payload: LoginRequest, service: CredentialServiceDependency) -> LoginResponse:
    result = await service.login(email=payload.email, password=payload.password)
    return LoginResponse(
        message=result.message,
        name=result.name,
        access_token=result.access_token.token,
    )


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Change a password after confirming the old one",
)
async def reset_password(
    payload: ResetPasswordRequest,
    service: CredentialServiceDependency,
) -> MessageResponse:
    message = await service.reset_password(
        email=payload.email,
        old_password=payload.old_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message=message)
