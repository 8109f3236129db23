"""
Authenticate user use case.
"""

from etherstake.domain.entities.user import User
from etherstake.domain.exceptions import InvalidCredentialsError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.services.i_password_hasher import IPasswordHasher


class AuthenticateUser:
    """
    Check an email/password pair.

    Unknown email and wrong password fail identically.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, email: str, password: str) -> User:
        """
        Authenticate credentials.

        Args:
            email: Account email (any case)
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If email unknown or password wrong
        """
        user = await self.user_repository.get_by_email(email)

        if not user or not self.password_hasher.verify(
            password, user.password_hash
        ):
            raise InvalidCredentialsError()

        return user
