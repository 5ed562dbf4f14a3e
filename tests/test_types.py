"""Tests for wax_agentkit.types."""

from __future__ import annotations

from decimal import Decimal

import pytest

from wax_agentkit.errors import ValidationError
from wax_agentkit.types import (
    MAINNET_CHAIN_ID,
    TESTNET_CHAIN_ID,
    Asset,
    Network,
    NodeType,
    validate_name,
)


class TestNetwork:
    def test_chain_ids(self):
        assert Network.MAINNET.chain_id == MAINNET_CHAIN_ID
        assert Network.TESTNET.chain_id == TESTNET_CHAIN_ID
        assert MAINNET_CHAIN_ID != TESTNET_CHAIN_ID

    def test_explorers(self):
        assert Network.MAINNET.explorer == "https://waxblock.io"
        assert Network.TESTNET.explorer == "https://testnet.waxblock.io"

    def test_from_string(self):
        assert Network("mainnet") is Network.MAINNET
        assert NodeType("hyperion") is NodeType.HYPERION


class TestValidateName:
    @pytest.mark.parametrize("name", ["eosio", "eosio.token", "mywaxaccount", "a1b2c3", "swap.alcor"])
    def test_valid(self, name):
        assert validate_name(name) == name

    @pytest.mark.parametrize("name", ["", "Alice", "abc6", "ends.", "abcdefghijklm", "has space"])
    def test_invalid(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate_name(name)
        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.details["value"] == name

    def test_field_label_in_message(self):
        with pytest.raises(ValidationError, match="Invalid recipient"):
            validate_name("Bob", "recipient")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            validate_name(12345)


class TestAsset:
    def test_parse(self):
        asset = Asset.parse("1.00000000 WAX")
        assert asset.amount == Decimal("1.00000000")
        assert asset.symbol == "WAX"
        assert asset.precision == 8

    def test_parse_keeps_precision(self):
        asset = Asset.parse("0.1000 TLM")
        assert asset.precision == 4
        assert str(asset) == "0.1000 TLM"

    def test_parse_integer_amount(self):
        asset = Asset.parse("5 WAX")
        assert asset.precision == 0
        assert str(asset) == "5 WAX"

    @pytest.mark.parametrize("text", ["1.0 wax", "WAX 1.0", "1.0", "", "1.0 TOOLONGSYM"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValidationError, match="Expected format like '1.00000000 WAX'"):
            Asset.parse(text)

    def test_from_amount_pads_precision(self):
        assert str(Asset.from_amount(10, "WAX")) == "10.00000000 WAX"
        assert str(Asset.from_amount(0.1, "WAX")) == "0.10000000 WAX"
        assert str(Asset.from_amount("2.5", "TLM", 4)) == "2.5000 TLM"

    def test_from_amount_invalid_amount(self):
        with pytest.raises(ValidationError, match="Invalid amount"):
            Asset.from_amount("lots", "WAX")

    def test_from_amount_invalid_symbol(self):
        with pytest.raises(ValidationError, match="Invalid token symbol"):
            Asset.from_amount(1, "wax")

    def test_frozen(self):
        asset = Asset.parse("1.00000000 WAX")
        with pytest.raises(AttributeError):
            asset.symbol = "TLM"
