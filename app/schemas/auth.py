"""Request/response schemas for auth endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)


class RegisterRequest(BaseModel):
    """New account; role defaults to 'user'."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Username",
    )
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )
    role: str = Field(default="user", min_length=1, max_length=32, description="Role")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Username",
    )
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )


class ResetPasswordRequest(BaseModel):
    """Replace the password of every account with this username."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Username",
    )
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        validation_alias=AliasChoices("newPassword", "new_password"),
        description="New password",
    )


class TokenResponse(BaseModel):
    """Signed token returned after successful login. Send it verbatim in the Authorization header."""

    token: str = Field(..., description="JWT access token")


class UserResponse(BaseModel):
    """Registered user (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class CurrentUser(BaseModel):
    """Authenticated identity decoded from the request's token."""

    username: str
    role: str
