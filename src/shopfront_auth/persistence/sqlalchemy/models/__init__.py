from shopfront_auth.persistence.sqlalchemy.models.refresh_token_model import (
    RefreshTokenModel,
)
from shopfront_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["RefreshTokenModel", "UserCredentialModel"]
