"""ORM model for products."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String

from app.models.base import Base


class Product(Base):
    """
    Catalog product.

    category_id references categories.id, but the database never checks it
    (foreign_keys pragma is off): products may point at missing categories.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    category_id = Column("categoryId", Integer, ForeignKey("categories.id"), nullable=True)
