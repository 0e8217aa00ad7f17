"""``user_credentials`` table."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopfront.domain.shared.time import utc_now
from shopfront_auth.persistence.sqlalchemy.base import AuthBase


class UserCredentialModel(AuthBase):
    """Password hash for one user, kept apart from the profile columns."""

    __tablename__ = "user_credentials"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    # Plain string column: the users table belongs to the application
    user_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"<UserCredentialModel user_id={self.user_id}>"
