"""Self-service profile update."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from shopfront.domain.shared.exceptions import ValidationError
from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory
    from shopfront.application.services import AuthenticationService

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Update name and email, and optionally change the password.

    A password change requires the current password.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        auth_service: AuthenticationService,
        current_user: UserContext,
    ):
        self._user_repo = user_repository
        self._auth_service = auth_service
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        auth_service: AuthenticationService,
        current_user: UserContext,
    ) -> UpdateProfileCommand:
        return cls(
            user_repository=factory.user_repository(),
            auth_service=auth_service,
            current_user=current_user,
        )

    async def execute(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        current_password: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)

        if new_password:
            if not current_password:
                msg = "Current password is required to set a new password"
                raise ValidationError(msg)
            await self._auth_service.change_password(
                self._user_id,
                current_password,
                new_password,
            )

        new_email = Email(email) if email is not None else None
        if new_email is not None and new_email.value != user.email:
            other = await self._user_repo.find_by_email(new_email.value)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsError(new_email.value)

        if name is not None or new_email is not None:
            user.update_profile(name=name, email=new_email)
            await self._user_repo.save(user)

        logger.info("Profile updated for user: %s", user.id)
        return user
