"""Unit tests for AuthenticationService."""

import hashlib
from datetime import timedelta
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from shopfront.application.services import AuthenticationService
from shopfront.domain.shared.exceptions import ErrorCode, ValidationError
from shopfront.domain.shared.time import utc_now
from shopfront.domain.user import EmailAlreadyExistsError, User, UserRole
from shopfront_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)
from shopfront_auth.repositories import RefreshTokenData, UserCredentialData
from tests.shared.fixtures.factories import TestUserFactory

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "password123"


def _build_service(test):
    test.user_repo = AsyncMock()
    test.credential_repo = AsyncMock()
    test.refresh_token_repo = AsyncMock()
    test.cart_repo = AsyncMock()
    test.password_service = Mock(spec=PasswordHashingService)
    test.jwt_service = Mock(spec=JWTService)
    test.jwt_service.refresh_token_lifetime = timedelta(days=7)

    test.service = AuthenticationService(
        user_repository=test.user_repo,
        credential_repository=test.credential_repo,
        refresh_token_repository=test.refresh_token_repo,
        cart_repository=test.cart_repo,
        password_service=test.password_service,
        jwt_service=test.jwt_service,
    )


def _credentials(user: User, password_hash: str = "hashed") -> UserCredentialData:
    return UserCredentialData(
        user_id=str(user.id),
        password_hash=password_hash,
        last_login_at=None,
    )


class TestAuthenticationServiceRegister:
    """Tests for user registration."""

    def setup_method(self):
        _build_service(self)

    @pytest.mark.asyncio
    async def test_register_creates_user_cart_and_tokens(self):
        """Test that register creates user and returns tokens."""
        # Arrange
        self.user_repo.exists_by_email.return_value = False
        self.password_service.hash.return_value = "hashed_password"
        self.jwt_service.create_access_token.return_value = "access_token"
        self.jwt_service.create_refresh_token.return_value = "refresh_token"

        # Act
        user, access_token, refresh_token = await self.service.register(
            email=TEST_EMAIL,
            password=TEST_PASSWORD,
            name="Ada",
        )

        # Assert
        assert user.email == TEST_EMAIL
        assert user.role == UserRole.CUSTOMER
        assert access_token == "access_token"
        assert refresh_token == "refresh_token"

        self.user_repo.save.assert_awaited_once_with(user)
        self.credential_repo.save.assert_awaited_once_with(
            user_id=user.id,
            password_hash="hashed_password",
        )
        self.cart_repo.get_or_create.assert_awaited_once_with(user.id)
        self.jwt_service.create_access_token.assert_called_once_with(
            user_id=user.id,
            role="CUSTOMER",
        )

    @pytest.mark.asyncio
    async def test_register_stores_only_the_refresh_token_hash(self):
        # Arrange
        self.user_repo.exists_by_email.return_value = False
        self.password_service.hash.return_value = "hashed_password"
        self.jwt_service.create_refresh_token.return_value = "refresh_token"

        # Act
        await self.service.register(TEST_EMAIL, TEST_PASSWORD, "Ada")

        # Assert
        kwargs = self.refresh_token_repo.create.await_args.kwargs
        assert kwargs["token_hash"] == hashlib.sha256(b"refresh_token").hexdigest()
        assert kwargs["token_hash"] != "refresh_token"

    @pytest.mark.asyncio
    async def test_register_raises_when_email_exists(self):
        """Test that register raises EmailAlreadyExistsError for existing email."""
        # Arrange
        self.user_repo.exists_by_email.return_value = True
        self.password_service.hash.return_value = "hashed_password"

        # Act & Assert
        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register(TEST_EMAIL, TEST_PASSWORD, "Ada")

        # User should not be created
        self.user_repo.save.assert_not_called()
        self.cart_repo.get_or_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_translates_weak_password(self):
        # Arrange
        self.password_service.hash.side_effect = WeakPasswordError("too short")

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await self.service.register(TEST_EMAIL, "short", "Ada")

        assert exc_info.value.code == ErrorCode.WEAK_PASSWORD
        self.user_repo.save.assert_not_called()


class TestAuthenticationServiceLogin:
    """Tests for user login."""

    def setup_method(self):
        _build_service(self)
        self.user = TestUserFactory.alice()

    @pytest.mark.asyncio
    async def test_login_returns_tokens(self):
        # Arrange
        self.user_repo.find_by_email.return_value = self.user
        self.credential_repo.find_by_user_id.return_value = _credentials(self.user)
        self.password_service.verify.return_value = True
        self.jwt_service.create_access_token.return_value = "access_token"
        self.jwt_service.create_refresh_token.return_value = "refresh_token"

        # Act
        user, access_token, refresh_token = await self.service.login(
            TestUserFactory.ALICE_EMAIL,
            TEST_PASSWORD,
        )

        # Assert
        assert user is self.user
        assert access_token == "access_token"
        assert refresh_token == "refresh_token"
        self.credential_repo.update_last_login.assert_awaited_once_with(self.user.id)

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(self):
        # Unknown email
        self.user_repo.find_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown:
            await self.service.login("nobody@b.com", TEST_PASSWORD)

        # Wrong password
        self.user_repo.find_by_email.return_value = self.user
        self.credential_repo.find_by_user_id.return_value = _credentials(self.user)
        self.password_service.verify.return_value = False
        with pytest.raises(InvalidCredentialsError) as wrong:
            await self.service.login(TestUserFactory.ALICE_EMAIL, "wrong-password")

        assert str(unknown.value) == str(wrong.value)
        self.refresh_token_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_credentials_are_invalid(self):
        self.user_repo.find_by_email.return_value = self.user
        self.credential_repo.find_by_user_id.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TestUserFactory.ALICE_EMAIL, TEST_PASSWORD)


class TestAuthenticationServiceRefresh:
    """Tests for refresh token verification and access token refresh."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.refresh_token_repo = AsyncMock()
        # Real JWT service so signatures and expiry are exercised
        self.jwt_service = JWTService(secret_key="unit-test-secret")
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=AsyncMock(),
            refresh_token_repository=self.refresh_token_repo,
            cart_repository=AsyncMock(),
            password_service=Mock(spec=PasswordHashingService),
            jwt_service=self.jwt_service,
        )
        self.user = TestUserFactory.alice()

    def _stored(self, token: str) -> RefreshTokenData:
        return RefreshTokenData(
            id=uuid4(),
            user_id=self.user.id,
            token_hash=hashlib.sha256(token.encode()).hexdigest(),
            expires_at=utc_now() + timedelta(days=1),
            created_at=utc_now(),
        )

    @pytest.mark.asyncio
    async def test_refresh_issues_access_token_with_current_role(self):
        # Arrange
        token = self.jwt_service.create_refresh_token(self.user.id)
        self.refresh_token_repo.find_valid_by_hash.return_value = self._stored(token)
        self.user_repo.find_by_id.return_value = self.user

        # Act
        user, access_token = await self.service.refresh_access_token(token)

        # Assert
        payload = self.jwt_service.verify_access_token(access_token)
        assert user is self.user
        assert payload.user_id == self.user.id
        assert payload.role == "CUSTOMER"

    @pytest.mark.asyncio
    async def test_revoked_token_is_rejected(self):
        token = self.jwt_service.create_refresh_token(self.user.id)
        self.refresh_token_repo.find_valid_by_hash.return_value = None

        with pytest.raises(InvalidTokenError):
            await self.service.refresh_access_token(token)

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected_without_lookup(self):
        token = self.jwt_service.create_refresh_token(
            self.user.id,
            expires_delta=timedelta(seconds=-1),
        )

        assert await self.service.verify_refresh_token(self.user.id, token) is False
        self.refresh_token_repo.find_valid_by_hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_subject_mismatch_is_rejected(self):
        token = self.jwt_service.create_refresh_token(uuid4())

        assert await self.service.verify_refresh_token(self.user.id, token) is False

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(self):
        token = self.jwt_service.create_access_token(self.user.id, "CUSTOMER")

        with pytest.raises(InvalidTokenError):
            await self.service.refresh_access_token(token)

    @pytest.mark.asyncio
    async def test_deleted_user_cannot_refresh(self):
        token = self.jwt_service.create_refresh_token(self.user.id)
        self.refresh_token_repo.find_valid_by_hash.return_value = self._stored(token)
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(InvalidTokenError):
            await self.service.refresh_access_token(token)

    @pytest.mark.asyncio
    async def test_garbage_token_is_rejected(self):
        with pytest.raises(InvalidTokenError):
            await self.service.refresh_access_token("garbage")


class TestAuthenticationServiceLogout:
    def setup_method(self):
        _build_service(self)
        self.jwt_service.peek_subject.return_value = TestUserFactory.ALICE_ID
        self.refresh_token_repo.delete_all_for_user.return_value = 2

    @pytest.mark.asyncio
    async def test_logout_revokes_all_tokens_of_owner(self):
        await self.service.logout("some-refresh-token")

        self.refresh_token_repo.delete_all_for_user.assert_awaited_once_with(
            TestUserFactory.ALICE_ID,
        )

    @pytest.mark.asyncio
    async def test_logout_without_token_is_a_no_op(self):
        await self.service.logout(None)

        self.refresh_token_repo.delete_all_for_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_logout_with_unreadable_token_is_a_no_op(self):
        self.jwt_service.peek_subject.return_value = None

        await self.service.logout("garbage")

        self.refresh_token_repo.delete_all_for_user.assert_not_called()


class TestAuthenticationServiceChangePassword:
    def setup_method(self):
        _build_service(self)
        self.user = TestUserFactory.alice()
        self.credential_repo.find_by_user_id.return_value = _credentials(self.user)

    @pytest.mark.asyncio
    async def test_change_password_stores_new_hash(self):
        self.password_service.verify.return_value = True
        self.password_service.hash.return_value = "new_hash"

        await self.service.change_password(self.user.id, TEST_PASSWORD, "new-password")

        self.credential_repo.save.assert_awaited_once_with(
            user_id=self.user.id,
            password_hash="new_hash",
        )

    @pytest.mark.asyncio
    async def test_wrong_current_password_is_rejected(self):
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.change_password(self.user.id, "wrong", "new-password")

        self.credential_repo.save.assert_not_called()
