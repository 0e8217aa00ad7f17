"""SQLAlchemy implementation of RefreshTokenRepository."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.shared.time import ensure_tz_aware, utc_now
from shopfront_auth.persistence.sqlalchemy.models import RefreshTokenModel
from shopfront_auth.repositories import RefreshTokenData, RefreshTokenRepository


class RefreshTokenRepositorySQLAlchemy(RefreshTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> UUID:
        token_id = uuid4()
        model = RefreshTokenModel(
            id=str(token_id),
            user_id=str(user_id),
            token_hash=token_hash,
            expires_at=expires_at,
        )
        self._session.add(model)
        await self._session.flush()
        return token_id

    async def find_valid_by_hash(
        self,
        user_id: UUID,
        token_hash: str,
    ) -> RefreshTokenData | None:
        stmt = select(RefreshTokenModel).where(
            RefreshTokenModel.user_id == str(user_id),
            RefreshTokenModel.token_hash == token_hash,
            RefreshTokenModel.expires_at > utc_now(),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return RefreshTokenData(
            id=UUID(model.id),
            user_id=UUID(model.user_id),
            token_hash=model.token_hash,
            expires_at=ensure_tz_aware(model.expires_at),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(RefreshTokenModel).where(
            RefreshTokenModel.user_id == str(user_id),
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore

    async def cleanup_expired(self) -> int:
        stmt = delete(RefreshTokenModel).where(
            RefreshTokenModel.expires_at < utc_now(),
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore
