"""Users table access."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.user import UserModel

logger = logging.getLogger(__name__)


def _to_user(row: UserModel) -> User:
    return User.reconstitute(
        id=row.id,
        email=row.email,
        name=row.name,
        role=row.role,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        row = await self._session.get(UserModel, user_id)
        return _to_user(row) if row is not None else None

    async def find_by_ids(self, user_ids: list[UUID]) -> dict[UUID, User]:
        if not user_ids:
            return {}
        rows = await self._session.scalars(
            select(UserModel).where(UserModel.id.in_(set(user_ids))),
        )
        return {row.id: _to_user(row) for row in rows}

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        address = email if isinstance(email, Email) else Email(email)
        row = await self._session.scalar(
            select(UserModel).where(UserModel.email == address.value),
        )
        return _to_user(row) if row is not None else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        row = await self._session.get(UserModel, user.id)
        if row is None:
            self._session.add(
                UserModel(
                    id=user.id,
                    email=user.email,
                    name=user.name,
                    role=user.role.value,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                ),
            )
            logger.info("Created user %s", user.id)
        else:
            row.email = user.email
            row.name = user.name
            row.updated_at = user.updated_at

        # The unique index on email is the final word on duplicates
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "unique" not in str(e).lower():
                raise
            raise EmailAlreadyExistsError(user.email) from e
