"""Registration, login and password reset."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.v1.deps import get_app_settings, get_credential_store, get_current_user
from app.core.config import Settings
from app.core.security import create_access_token, hash_password, verify_password
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserResponse,
)
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserResponse:
    """
    Create an account. The role defaults to 'user'.

    Usernames are not unique: registering an existing name adds another account.
    """
    user = store.create(
        body.username,
        hash_password(body.password, rounds=settings.BCRYPT_ROUNDS),
        role=body.role,
    )
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenResponse | JSONResponse:
    """
    Authenticate with username and password; returns a signed token.
    Send the token in the Authorization header exactly as returned.
    """
    user = store.find_by_username(body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.warning("Failed login for username=%s", body.username)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Invalid credentials"},
        )
    token = create_access_token(user.username, user.role, settings)
    return TokenResponse(token=token)


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}},
)
def reset_password(
    body: ResetPasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    """Set a new password for the named user. Any authenticated caller may reset any user."""
    updated = store.update_password(
        body.username,
        hash_password(body.new_password, rounds=settings.BCRYPT_ROUNDS),
    )
    logger.info(
        "Password reset for username=%s by %s (rows=%s)",
        body.username,
        current_user.username,
        updated,
    )
    return MessageResponse(message="Password reset successfully")
