"""
bcrypt password hashing via passlib.
"""

from passlib.context import CryptContext

from etherstake.domain.services.i_password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of the password hasher."""

    def __init__(self, rounds: int = 12):
        """
        Args:
            rounds: bcrypt cost factor (log2 iterations)
        """
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Unrecognised or corrupted hash
            return False
