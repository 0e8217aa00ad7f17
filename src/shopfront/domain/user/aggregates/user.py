"""User aggregate for identity and profile concerns."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from shopfront.domain.shared.exceptions import ValidationError
from shopfront.domain.shared.time import utc_now
from shopfront.domain.user.value_objects import Email, UserRole

MAX_NAME_LENGTH = 100


def _validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        msg = "Name is required"
        raise ValidationError(msg)
    if len(cleaned) > MAX_NAME_LENGTH:
        msg = f"Name cannot exceed {MAX_NAME_LENGTH} characters"
        raise ValidationError(msg)
    return cleaned


class User:
    """
    User aggregate root.

    The password hash lives in the credential store, never on the
    aggregate. The role can only be chosen at creation time.
    """

    def __init__(
        self,
        email: Union[str, Email],
        name: str,
        role: Union[str, UserRole] = UserRole.CUSTOMER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = _validate_name(name)
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: str | None = None,
        email: Union[str, Email, None] = None,
    ) -> None:
        if name is not None:
            self._name = _validate_name(name)
        if email is not None:
            self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> "User":
        return cls(email=email, name=name, role=role)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
