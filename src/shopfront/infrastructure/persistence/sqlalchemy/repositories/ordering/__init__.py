"""SQLAlchemy repository implementations for ordering domain."""

from shopfront.infrastructure.persistence.sqlalchemy.repositories.ordering.order_repository import (  # NOQA: E501
    OrderRepositorySQLAlchemy,
)

__all__ = ["OrderRepositorySQLAlchemy"]
