"""Category entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from shopfront.domain.catalog.value_objects import Slug
from shopfront.domain.shared.exceptions import ValidationError
from shopfront.domain.shared.time import utc_now


class Category:
    """A product category. The slug is always derived from the name."""

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._name = self._validate_name(name)
        self._slug = Slug.from_name(self._name)
        self._description = description
        self._created_at = created_at or utc_now()

    @staticmethod
    def _validate_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            msg = "Category name is required"
            raise ValidationError(msg)
        return cleaned

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        description: Optional[str],
        created_at: datetime,
    ) -> "Category":
        return cls(id=id, name=name, description=description, created_at=created_at)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return self._slug.value

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update(self, name: str, description: Optional[str] = None) -> None:
        self._name = self._validate_name(name)
        self._slug = Slug.from_name(self._name)
        self._description = description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Category(id={self._id}, slug={self.slug!r})"
