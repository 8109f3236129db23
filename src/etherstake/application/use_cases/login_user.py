"""
Login user use case.

Authenticates existing user and issues an access token.
"""

from etherstake.application.dto.auth_dto import AuthResult
from etherstake.application.use_cases.authenticate_user import AuthenticateUser
from etherstake.domain.exceptions import InvalidCredentialsError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.services.i_password_hasher import IPasswordHasher
from etherstake.domain.services.i_token_service import ITokenService
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class LoginUser:
    """
    Login existing user use case.

    Flow:
    1. Authenticate email/password
    2. Issue access token
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        """Initialize use case with dependencies."""
        self._authenticate = AuthenticateUser(user_repository, password_hasher)
        self._token_service = token_service

    async def execute(self, email: str, password: str) -> AuthResult:
        """
        Login existing user.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            AuthResult with user and token

        Raises:
            InvalidCredentialsError: Bad email or password
        """
        try:
            user = await self._authenticate.execute(email, password)
        except InvalidCredentialsError:
            logger.warning("Failed login attempt", extra={"email": email.lower()})
            raise

        return AuthResult(user=user, token=self._token_service.issue(user))
