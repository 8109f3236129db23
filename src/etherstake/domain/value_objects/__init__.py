"""
Domain value objects.
"""

from etherstake.domain.value_objects.pagination import Page, PageRequest
from etherstake.domain.value_objects.staking_terms import (
    StakingTerms,
    quantize_money,
)
from etherstake.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "Page",
    "PageRequest",
    "StakingTerms",
    "WalletAddress",
    "quantize_money",
]
