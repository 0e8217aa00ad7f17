"""Decoded token claims."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

ACCESS_TOKEN_TYPE = "access"  # NOQA: S105
REFRESH_TOKEN_TYPE = "refresh"  # NOQA: S105


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a token whose signature has already been checked.

    ``role`` is only present on access tokens; it is the role the user had
    when the token was issued.
    """

    user_id: UUID
    role: str | None
    exp: datetime
    token_type: str

    def is_expired(self) -> bool:
        return self.exp < datetime.now(tz=self.exp.tzinfo)

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN_TYPE

    def is_refresh_token(self) -> bool:
        return self.token_type == REFRESH_TOKEN_TYPE
