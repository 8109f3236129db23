"""
Password hasher interface.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for one-way password hashing.

    Clean Architecture: Domain layer defines interface,
    Infrastructure layer picks the algorithm.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Encoded hash, safe to store
        """

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Args:
            password: Plaintext password
            password_hash: Stored hash

        Returns:
            True if password matches, False otherwise
        """
