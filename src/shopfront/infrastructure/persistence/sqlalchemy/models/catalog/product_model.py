"""SQLAlchemy models for products and their images."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfront.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ProductModel(Base, TimestampMixin):
    """Database model for products.

    Data Integrity Constraints:
    - price must be positive
    - stock can never go below zero (order placement relies on this as the
      last line of defence behind the guarded decrement)
    """

    __tablename__ = "products"

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_product_price_positive"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    images: Mapped[list[ProductImageModel]] = relationship(
        "ProductImageModel",
        cascade="all, delete-orphan",
        order_by="ProductImageModel.position",
        lazy="selectin",  # Always load images with product
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, name={self.name}, stock={self.stock})>"


class ProductImageModel(Base):
    __tablename__ = "product_images"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    product_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
