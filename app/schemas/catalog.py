"""Request/response schemas for categories and products."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class CategoryRequest(BaseModel):
    """Body for creating or updating a category."""

    name: str = Field(..., min_length=1, max_length=255)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ProductRequest(BaseModel):
    """Body for creating or updating a product. categoryId is not checked against categories."""

    name: str = Field(..., min_length=1, max_length=255)
    price: float
    category_id: int = Field(
        ...,
        ge=SQLITE_INT_MIN,
        le=SQLITE_INT_MAX,
        validation_alias=AliasChoices("categoryId", "category_id"),
        description="Id of the product's category",
    )


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    category_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("categoryId", "category_id"),
        serialization_alias="categoryId",
    )
