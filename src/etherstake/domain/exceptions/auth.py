"""
Authentication and authorization domain exceptions.
"""

from etherstake.domain.exceptions.base import EtherStakeException


class AuthenticationError(EtherStakeException):
    """Raised when the caller cannot be identified."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class InvalidCredentialsError(AuthenticationError):
    """Raised on bad email/password; never says which one was wrong."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is supplied."""

    def __init__(self):
        super().__init__("Authentication required")


class ExpiredTokenError(AuthenticationError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__("Authentication token has expired")


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is malformed or invalid."""

    def __init__(self):
        super().__init__("Invalid authentication token")


class AuthorizationError(EtherStakeException):
    """Raised when an authenticated caller is not entitled to an action."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message, code="FORBIDDEN")


class InsufficientRoleError(AuthorizationError):
    """Raised when the caller lacks a required role."""

    def __init__(self, required_role: str):
        self.required_role = required_role
        super().__init__(f"This action requires the '{required_role}' role")
