"""Shared chain types: networks, node kinds, names and assets."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union

from .errors import ValidationError

MAINNET_CHAIN_ID = "1064487b3cd1a897ce03ae5b6a865651747e2e152090f99c1d19d44e01aea5a4"
TESTNET_CHAIN_ID = "f16b1833c747c43682f4386fca9cbb327929334a762755ebec17f6f23c9b8a12"

WAX_SYMBOL = "WAX"
WAX_PRECISION = 8
TOKEN_CONTRACT = "eosio.token"
SYSTEM_CONTRACT = "eosio"

_NAME_RE = re.compile(r"^[a-z1-5.]{0,11}[a-z1-5]$|^[a-z1-5.]{12}[a-j1-5]$")
_ASSET_RE = re.compile(r"^\s*(-?\d+(?:\.(\d+))?)\s+([A-Z]{1,7})\s*$")


class Network(str, Enum):
    """WAX networks the toolkit can target."""

    MAINNET = "mainnet"
    TESTNET = "testnet"

    @property
    def chain_id(self) -> str:
        return MAINNET_CHAIN_ID if self is Network.MAINNET else TESTNET_CHAIN_ID

    @property
    def explorer(self) -> str:
        if self is Network.MAINNET:
            return "https://waxblock.io"
        return "https://testnet.waxblock.io"


class NodeType(str, Enum):
    """Kinds of API node published by NodePulse."""

    HYPERION = "hyperion"
    ATOMIC = "atomic"
    LIGHTAPI = "lightapi"
    IPFS = "ipfs"


def validate_name(name: str, field: str = "account name") -> str:
    """Check ``name`` is a valid Antelope account name and return it."""
    if not isinstance(name, str) or not _NAME_RE.match(name):
        raise ValidationError(
            f"Invalid {field}: {name!r}",
            details={"field": field, "value": name},
        )
    return name


@dataclass(frozen=True)
class Asset:
    """A token quantity such as ``1.00000000 WAX``."""

    amount: Decimal
    symbol: str
    precision: int

    @classmethod
    def parse(cls, text: str) -> "Asset":
        match = _ASSET_RE.match(text) if isinstance(text, str) else None
        if not match:
            raise ValidationError(
                f"Invalid asset {text!r}. Expected format like '1.00000000 WAX'.",
                details={"value": text},
            )
        amount, fraction, symbol = match.groups()
        return cls(Decimal(amount), symbol, len(fraction or ""))

    @classmethod
    def from_amount(
        cls,
        amount: Union[int, float, str, Decimal],
        symbol: str,
        precision: int = WAX_PRECISION,
    ) -> "Asset":
        try:
            value = Decimal(str(amount))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid amount: {amount!r}") from exc
        if not re.fullmatch(r"[A-Z]{1,7}", symbol or ""):
            raise ValidationError(f"Invalid token symbol: {symbol!r}")
        return cls(value.quantize(Decimal(1).scaleb(-precision)), symbol, precision)

    def __str__(self) -> str:
        return f"{self.amount:.{self.precision}f} {self.symbol}"
