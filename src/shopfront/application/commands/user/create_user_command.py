from shopfront.domain.cart import CartRepository
from shopfront.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserRepository,
    UserRole,
)
from shopfront_auth.repositories import UserCredentialRepository
from shopfront_auth.services import PasswordHashingService


class CreateUserCommand:
    """Command to create a user with an explicit role.

    Used by the command line to create administrators, which is the only
    way to obtain the ADMIN role.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        cart_repository: CartRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._cart_repo = cart_repository
        self._password_service = password_service

    async def execute(
        self,
        email: str,
        name: str,
        password: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> User:
        existing = await self._user_repo.find_by_email(email)
        if existing:
            raise EmailAlreadyExistsError(email)

        user = User.create(email, name=name, role=role)
        password_hash = self._password_service.hash(password)

        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)
        await self._cart_repo.get_or_create(user.id)

        return user
