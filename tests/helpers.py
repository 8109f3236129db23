"""
Shared test helpers.
"""

from typing import Dict
from uuid import uuid4

TEST_PASSWORD = "s3cure-passw0rd"


def make_wallet() -> str:
    """Generate a random, well-formed Ethereum address."""
    return f"0x{uuid4().hex}{uuid4().hex[:8]}"


def make_email(prefix: str = "user") -> str:
    return f"{prefix}-{uuid4().hex[:8]}@example.com"


def auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
