"""Category CRUD. Every route requires a valid token."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.v1.deps import (
    get_app_settings,
    get_category_store,
    get_current_user,
    not_found,
)
from app.core.config import Settings
from app.models import Category
from app.schemas.auth import CurrentUser
from app.schemas.catalog import (
    SQLITE_INT_MAX,
    SQLITE_INT_MIN,
    CategoryRequest,
    CategoryResponse,
)
from app.schemas.common import MessageResponse
from app.services.resource_store import ResourceStore

router = APIRouter()

CategoryStore = Annotated[ResourceStore[Category], Depends(get_category_store)]
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
CategoryId = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


@router.get("", response_model=list[CategoryResponse])
def list_categories(_user: AuthenticatedUser, store: CategoryStore) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in store.list()]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryRequest,
    _user: AuthenticatedUser,
    store: CategoryStore,
) -> CategoryResponse:
    return CategoryResponse.model_validate(store.create(name=body.name))


@router.get("/{category_id}", response_model=CategoryResponse | MessageResponse)
def get_category(
    category_id: CategoryId,
    _user: AuthenticatedUser,
    store: CategoryStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CategoryResponse | dict[str, str]:
    """Return the category, or a 'Category not found' message (404 in strict mode)."""
    category = store.get(category_id)
    if category is None:
        return not_found(settings, "Category not found")
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: CategoryId,
    body: CategoryRequest,
    _user: AuthenticatedUser,
    store: CategoryStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CategoryResponse:
    """
    Rename a category and echo the submitted values.

    A missing id still echoes unless STRICT_NOT_FOUND is set.
    """
    updated = store.update(category_id, name=body.name)
    if updated == 0 and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryResponse(id=category_id, name=body.name)


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: CategoryId,
    _user: AuthenticatedUser,
    store: CategoryStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    """Delete a category. Products that reference it are left as they are."""
    deleted = store.delete(category_id)
    if deleted == 0 and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return MessageResponse(message="Category deleted")
