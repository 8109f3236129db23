"""
WalletAddress value object - Immutable Ethereum wallet address.
"""

import re
from dataclasses import dataclass

from etherstake.domain.exceptions.base import ValidationError

_ETH_ADDRESS = re.compile(r"0x[a-fA-F0-9]{40}")


@dataclass(frozen=True)
class WalletAddress:
    """
    Value object representing a validated Ethereum wallet address.

    Business rules:
    - Must start with 0x followed by exactly 40 hex characters
    - Case is preserved (checksum casing is not verified)
    - Immutable once created
    """

    address: str

    def __post_init__(self):
        """Validate wallet address on creation."""
        if not self.address:
            raise ValidationError("wallet_address", "cannot be empty")

        if not _ETH_ADDRESS.fullmatch(self.address):
            raise ValidationError(
                "wallet_address",
                "must be 0x followed by 40 hexadecimal characters",
            )

    @classmethod
    def is_valid(cls, address: str) -> bool:
        """Check address format without raising."""
        return bool(address) and bool(_ETH_ADDRESS.fullmatch(address))

    def __str__(self) -> str:
        return self.address
