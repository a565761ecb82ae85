"""Request dependencies: settings, stores on app.state, and the token gate."""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from app.core.config import Settings
from app.core.database import Database
from app.core.security import decode_access_token
from app.models import Category, Product
from app.schemas.auth import CurrentUser
from app.services.credential_store import CredentialStore
from app.services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

# Raw token in the Authorization header; no "Bearer " scheme prefix.
token_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Token returned by POST /login, sent as-is.",
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_category_store(request: Request) -> ResourceStore[Category]:
    return request.app.state.categories


def get_product_store(request: Request) -> ResourceStore[Product]:
    return request.app.state.products


def get_current_user(
    token: Annotated[str | None, Depends(token_header)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CurrentUser:
    """
    Dependency: require a valid token and return its identity for this request.

    Raises 401 when no token is sent and 403 when the token does not verify.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        identity = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        logger.info("Rejected token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        ) from e
    return CurrentUser(username=identity.username, role=identity.role)


def not_found(settings: Settings, message: str) -> dict[str, str]:
    """
    Missing-id outcome for get/update/delete.

    By default this is a 200 body carrying the message; with STRICT_NOT_FOUND
    it is a 404.
    """
    if settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
    return {"message": message}
