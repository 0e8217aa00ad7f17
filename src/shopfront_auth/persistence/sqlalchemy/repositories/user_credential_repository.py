"""Credential rows in ``user_credentials``."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.shared.time import utc_now
from shopfront_auth.persistence.sqlalchemy.models import UserCredentialModel
from shopfront_auth.repositories import UserCredentialData, UserCredentialRepository

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        row = await self._row(user_id)
        if row is None:
            row = UserCredentialModel(user_id=str(user_id), password_hash=password_hash)
            self._session.add(row)
            logger.info("Stored credentials for user %s", user_id)
        else:
            row.password_hash = password_hash
            row.updated_at = utc_now()
            logger.debug("Replaced password hash for user %s", user_id)
        await self._session.flush()
        return self._snapshot(row)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        row = await self._row(user_id)
        return None if row is None else self._snapshot(row)

    async def update_last_login(self, user_id: UUID) -> None:
        row = await self._row(user_id)
        if row is None:
            return
        row.last_login_at = utc_now()
        await self._session.flush()

    async def _row(self, user_id: UUID) -> UserCredentialModel | None:
        return await self._session.scalar(
            select(UserCredentialModel).where(
                UserCredentialModel.user_id == str(user_id),
            ),
        )

    @staticmethod
    def _snapshot(row: UserCredentialModel) -> UserCredentialData:
        return UserCredentialData(
            user_id=row.user_id,
            password_hash=row.password_hash,
            last_login_at=row.last_login_at,
        )
