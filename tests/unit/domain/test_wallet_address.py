"""
Unit tests for WalletAddress value object.
"""

import pytest

from etherstake.domain.exceptions import ValidationError
from etherstake.domain.value_objects.wallet_address import WalletAddress

VALID = "0x52908400098527886E0F7030069857D2E4169EE7"


class TestWalletAddress:
    """Unit tests for WalletAddress."""

    def test_accepts_checksummed_address(self):
        wallet = WalletAddress(VALID)

        assert wallet.address == VALID
        assert str(wallet) == VALID

    def test_accepts_lowercase_address(self):
        assert WalletAddress(VALID.lower()).address == VALID.lower()

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "52908400098527886E0F7030069857D2E4169EE7",
            "0x52908400098527886E0F7030069857D2E4169EE",
            "0x52908400098527886E0F7030069857D2E4169EE77",
            "0xZZ908400098527886E0F7030069857D2E4169EE7",
            VALID + "\n",
            " " + VALID,
        ],
    )
    def test_rejects_malformed_address(self, address):
        with pytest.raises(ValidationError) as exc_info:
            WalletAddress(address)

        assert exc_info.value.field == "wallet_address"

    def test_is_valid_does_not_raise(self):
        assert WalletAddress.is_valid(VALID) is True
        assert WalletAddress.is_valid("0x123") is False
        assert WalletAddress.is_valid("") is False

    def test_is_immutable(self):
        wallet = WalletAddress(VALID)

        with pytest.raises(AttributeError):
            wallet.address = "0x0"
