"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from shopfront_auth.exceptions import ExpiredTokenError, InvalidTokenError
from shopfront_auth.schemas import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Handles access tokens (short-lived, carry the role) and refresh tokens
    (long-lived, carry only the subject). Refresh tokens may be signed with
    a separate secret.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "CUSTOMER")
    >>> payload = service.verify_access_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 96
    DEFAULT_REFRESH_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        refresh_secret_key: str | None = None,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing access tokens. Must be kept secure.
        refresh_secret_key
            Secret key for signing refresh tokens (defaults to secret_key)
        access_token_expire_hours
            Hours until access token expires (default 96)
        refresh_token_expire_days
            Days until refresh token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._refresh_secret_key = refresh_secret_key or secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    @property
    def refresh_token_lifetime(self) -> timedelta:
        return self._refresh_expire

    def create_access_token(
        self,
        user_id: UUID,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        role
            The user's role, embedded as a claim
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "role": role,
            "type": ACCESS_TOKEN_TYPE,
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def create_refresh_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a long-lived refresh token.

        Each token carries a random ``jti`` so two sessions opened in the
        same second still get distinct tokens (and distinct stored hashes).

        Parameters
        ----------
        user_id
            The user's unique identifier
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "type": REFRESH_TOKEN_TYPE,
            "jti": uuid4().hex,
            "iat": now,
            "exp": now + (expires_delta or self._refresh_expire),
        }
        return jwt.encode(
            payload,
            self._refresh_secret_key,
            algorithm=self.ALGORITHM,
        )

    def verify_access_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed, or not an access token
        """
        payload = self._decode(token, self._secret_key)
        if not payload.is_access_token():
            msg = "Invalid token type"
            raise InvalidTokenError(msg)
        return payload

    def verify_refresh_token(self, token: str) -> TokenPayload:
        """Verify and decode a refresh token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed, or not a refresh token
        """
        payload = self._decode(token, self._refresh_secret_key)
        if not payload.is_refresh_token():
            msg = "Invalid token type"
            raise InvalidTokenError(msg)
        return payload

    def peek_subject(self, token: str) -> UUID | None:
        """Read the subject claim WITHOUT verifying signature or expiry.

        Only use the result to locate server-side state that is then
        verified separately.
        """
        try:
            claims = jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
                algorithms=[self.ALGORITHM],
            )
            return UUID(claims["sub"])
        except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
            return None

    def _decode(self, token: str, secret: str) -> TokenPayload:
        try:
            claims = jwt.decode(token, secret, algorithms=[self.ALGORITHM])

            return TokenPayload(
                user_id=UUID(claims["sub"]),
                role=claims.get("role"),
                exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
                token_type=claims.get("type", ACCESS_TOKEN_TYPE),
            )

        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
