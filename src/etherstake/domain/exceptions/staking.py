"""
Stake lifecycle domain exceptions.
"""

from etherstake.domain.exceptions.auth import AuthorizationError
from etherstake.domain.exceptions.base import EtherStakeException


class StakeAccessDeniedError(AuthorizationError):
    """Raised when a user touches a stake they do not own."""

    def __init__(self, action: str = "access"):
        super().__init__(f"You are not authorized to {action} this stake")


class InvalidStakeStateError(EtherStakeException):
    """Raised on an illegal lifecycle transition."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_STATE")


class StakeAlreadyFinalizedError(InvalidStakeStateError):
    """Raised when cancelling or completing a terminal stake."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Stake is already {status}")


class StakeTermNotElapsedError(InvalidStakeStateError):
    """Raised when completing a stake before its end date."""

    def __init__(self):
        super().__init__("Stake term not yet elapsed")
