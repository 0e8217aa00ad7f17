from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopfront.domain.shared.time import utc_now
from shopfront_auth.persistence.sqlalchemy.base import AuthBase


class RefreshTokenModel(AuthBase):
    __tablename__ = "refresh_tokens"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    # sha256 hexdigest of the raw token; the token itself is never stored
    token_hash: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<RefreshTokenModel user_id={self.user_id}>"
