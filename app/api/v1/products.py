"""Product CRUD. Every route requires a valid token; categoryId is stored as given."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.v1.deps import (
    get_app_settings,
    get_current_user,
    get_product_store,
    not_found,
)
from app.core.config import Settings
from app.models import Product
from app.schemas.auth import CurrentUser
from app.schemas.catalog import (
    SQLITE_INT_MAX,
    SQLITE_INT_MIN,
    ProductRequest,
    ProductResponse,
)
from app.schemas.common import MessageResponse
from app.services.resource_store import ResourceStore

router = APIRouter()

ProductStore = Annotated[ResourceStore[Product], Depends(get_product_store)]
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
ProductId = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


@router.get("", response_model=list[ProductResponse])
def list_products(_user: AuthenticatedUser, store: ProductStore) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in store.list()]


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductRequest,
    _user: AuthenticatedUser,
    store: ProductStore,
) -> ProductResponse:
    """Create a product. The category id is not checked against existing categories."""
    product = store.create(name=body.name, price=body.price, category_id=body.category_id)
    return ProductResponse.model_validate(product)


@router.get("/{product_id}", response_model=ProductResponse | MessageResponse)
def get_product(
    product_id: ProductId,
    _user: AuthenticatedUser,
    store: ProductStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ProductResponse | dict[str, str]:
    product = store.get(product_id)
    if product is None:
        return not_found(settings, "Product not found")
    return ProductResponse.model_validate(product)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: ProductId,
    body: ProductRequest,
    _user: AuthenticatedUser,
    store: ProductStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ProductResponse:
    """Overwrite name, price and categoryId; echoes the submitted values."""
    updated = store.update(
        product_id,
        name=body.name,
        price=body.price,
        category_id=body.category_id,
    )
    if updated == 0 and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return ProductResponse(
        id=product_id,
        name=body.name,
        price=body.price,
        category_id=body.category_id,
    )


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: ProductId,
    _user: AuthenticatedUser,
    store: ProductStore,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    deleted = store.delete(product_id)
    if deleted == 0 and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return MessageResponse(message="Product deleted")
