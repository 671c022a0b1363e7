import re
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from club_service.api.error import raise_for_error
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.auth import (
    AuthResponse,
    GetProfileUseCase,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    ProfileResponse,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from club_service.depends import get_current_actor, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    student_id: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=50)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not (
            re.search(r"[a-z]", value)
            and re.search(r"[A-Z]", value)
            and re.search(r"\d", value)
        ):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter and one number"
            )
        return value

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Must be at least 2 characters")
        return value


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register a new MEMBER account.

    Raises:
        - 400 Bad Request: Invalid input (VALIDATION_ERROR)
        - 409 Conflict: Email or student ID already registered
    """
    command = RegisterCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        student_id=request.student_id,
        phone=request.phone,
    )

    result = await RegisterUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
                "STUDENT_ID_EXISTS": status.HTTP_409_CONFLICT,
            },
        )

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Authenticate and open a session.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account deactivated
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
                "ACCOUNT_DEACTIVATED": status.HTTP_403_FORBIDDEN,
            },
        )

    return result.value


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post(
    "/refresh-token",
    status_code=status.HTTP_200_OK,
    response_model=RefreshTokenResponse,
)
async def refresh_token(
    request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Rotate the refresh token and issue a new access token.

    Raises:
        - 401 Unauthorized: Unknown, revoked or expired refresh token,
          or the account is gone or deactivated
    """
    result = await RefreshTokenUseCase(uow).execute(request.refresh_token)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
                "SESSION_REVOKED": status.HTTP_401_UNAUTHORIZED,
                "SESSION_EXPIRED": status.HTTP_401_UNAUTHORIZED,
                "ACCOUNT_DEACTIVATED": status.HTTP_401_UNAUTHORIZED,
            },
        )

    return result.value


class LogoutRequest(BaseModel):
    refresh_token: Optional[str] = Field(
        None, description="Session to close; all sessions when omitted"
    )


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    request: Optional[LogoutRequest] = None,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    refresh = request.refresh_token if request is not None else None
    result = await LogoutUseCase(uow).execute(actor, refresh)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error, {"USER_NOT_FOUND": status.HTTP_404_NOT_FOUND})

    return result.value
