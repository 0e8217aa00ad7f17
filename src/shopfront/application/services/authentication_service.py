"""Authentication service for registration, login and session refresh."""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.shared.exceptions import ErrorCode, ValidationError
from shopfront.domain.shared.time import utc_now
from shopfront.domain.user import EmailAlreadyExistsError, User, UserRole
from shopfront_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    WeakPasswordError,
)
from shopfront_auth.repositories import (
    RefreshTokenRepository,
    UserCredentialRepository,
)

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory
    from shopfront.domain.cart import CartRepository
    from shopfront.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates shopfront_auth infrastructure (password hashing, JWT
    tokens, hashed refresh token storage) with the User domain to provide:
    - Registration (user + credentials + empty cart)
    - Login with password
    - Access token refresh from a stored refresh token
    - Logout (revoke every stored refresh token of the user)
    - Password change
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        refresh_token_repository: RefreshTokenRepository,
        cart_repository: CartRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._refresh_token_repo = refresh_token_repository
        self._cart_repo = cart_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ) -> AuthenticationService:
        return cls(
            user_repository=factory.user_repository(),
            credential_repository=factory.credential_repository(),
            refresh_token_repository=factory.refresh_token_repository(),
            cart_repository=factory.cart_repository(),
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @staticmethod
    def _hash_token(raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode()).hexdigest()

    def _hash_password(self, password: str) -> str:
        try:
            return self._password_service.hash(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e

    def issue_access_token(self, user_id: UUID, role: UserRole) -> str:
        return self._jwt_service.create_access_token(user_id=user_id, role=role.value)

    async def issue_refresh_token(self, user_id: UUID) -> str:
        """Create a refresh token and store only its hash with its expiry."""
        token = self._jwt_service.create_refresh_token(user_id=user_id)
        await self._refresh_token_repo.create(
            user_id=user_id,
            token_hash=self._hash_token(token),
            expires_at=utc_now() + self._jwt_service.refresh_token_lifetime,
        )
        return token

    async def _issue_token_pair(self, user: User) -> tuple[str, str]:
        access_token = self.issue_access_token(user.id, user.role)
        refresh_token = await self.issue_refresh_token(user.id)
        return access_token, refresh_token

    async def register(
        self,
        email: str,
        password: str,
        name: str,
    ) -> tuple[User, str, str]:
        password_hash = self._hash_password(password)

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = User.create(email, name=name, role=UserRole.CUSTOMER)
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)
        await self._cart_repo.get_or_create(user.id)

        access_token, refresh_token = await self._issue_token_pair(user)

        logger.info("User registered: %s", user.id)
        return user, access_token, refresh_token

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str, str]:
        # Same error for unknown email and wrong password
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)
        access_token, refresh_token = await self._issue_token_pair(user)

        logger.info("User logged in: %s", user.id)
        return user, access_token, refresh_token

    def verify_access_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_access_token(token)

    async def verify_refresh_token(self, user_id: UUID, token: str) -> bool:
        """Check a refresh token against its stored hash.

        Fails closed: any signature, expiry, subject or lookup mismatch
        returns False.
        """
        try:
            payload = self._jwt_service.verify_refresh_token(token)
        except InvalidTokenError as e:
            logger.warning("Rejected refresh token for user %s: %s", user_id, e)
            return False

        if payload.user_id != user_id:
            logger.warning("Refresh token subject mismatch for user %s", user_id)
            return False

        token_hash = self._hash_token(token)
        stored = await self._refresh_token_repo.find_valid_by_hash(user_id, token_hash)
        if stored is None:
            return False

        return hmac.compare_digest(stored.token_hash, token_hash)

    async def refresh_access_token(self, refresh_token: str) -> tuple[User, str]:
        """Issue a new access token. The refresh token itself is not rotated.

        Raises
        ------
        InvalidTokenError
            If the refresh token is not valid or no longer stored
        """
        user_id = self._jwt_service.peek_subject(refresh_token)
        if user_id is None:
            msg = "Invalid refresh token"
            raise InvalidTokenError(msg)

        if not await self.verify_refresh_token(user_id, refresh_token):
            msg = "Invalid refresh token"
            raise InvalidTokenError(msg)

        # Reload for the current role
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)

        logger.debug("Access token refreshed for user: %s", user.id)
        return user, self.issue_access_token(user.id, user.role)

    async def logout(self, refresh_token: str | None) -> None:
        """Revoke every stored refresh token of the token's owner.

        Best effort: an unreadable token simply revokes nothing.
        """
        if not refresh_token:
            return

        user_id = self._jwt_service.peek_subject(refresh_token)
        if user_id is None:
            logger.debug("Logout with unreadable refresh token, nothing to revoke")
            return

        revoked = await self._refresh_token_repo.delete_all_for_user(user_id)
        logger.info("User logged out: %s (%d sessions revoked)", user_id, revoked)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None:
            msg = "User credentials not found"
            raise InvalidCredentialsError(msg)
        if not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        new_hash = self._hash_password(new_password)
        await self._credential_repo.save(user_id=user_id, password_hash=new_hash)

        logger.info("Password changed for user: %s", user_id)
