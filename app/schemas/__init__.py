"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserResponse,
)
from app.schemas.catalog import (
    CategoryRequest,
    CategoryResponse,
    ProductRequest,
    ProductResponse,
)
from app.schemas.common import ErrorResponse, HealthResponse, MessageResponse

__all__ = [
    "CategoryRequest",
    "CategoryResponse",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProductRequest",
    "ProductResponse",
    "RegisterRequest",
    "ResetPasswordRequest",
    "TokenResponse",
    "UserResponse",
]
