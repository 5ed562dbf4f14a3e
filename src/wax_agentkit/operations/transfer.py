"""Token transfers from the agent's account."""
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Union

from ..errors import ValidationError, wrap_error
from ..session import DEFAULT_EXPIRE_SECONDS
from ..types import TOKEN_CONTRACT, WAX_PRECISION, Asset, validate_name

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit


def transfer(
    toolkit: "WaxAgentToolkit",
    quantity: Union[int, float, str, Decimal],
    symbol: str,
    to: str,
    *,
    contract: str = TOKEN_CONTRACT,
    precision: int = WAX_PRECISION,
    memo: Optional[str] = None,
) -> dict[str, Any]:
    """Transfer ``quantity`` ``symbol`` tokens to ``to``.

    The quantity is formatted with ``precision`` decimals (8 for WAX).
    """
    try:
        validate_name(to, "recipient")
        validate_name(contract, "token contract")
        asset = Asset.from_amount(quantity, symbol, precision)
        if asset.amount <= 0:
            raise ValidationError("Invalid token quantity. Must be a positive number.")

        session = toolkit.get_session()
        return session.transact(
            {
                "account": contract,
                "name": "transfer",
                "authorization": session.authorization(),
                "data": {
                    "from": toolkit.account_name,
                    "to": to,
                    "quantity": str(asset),
                    "memo": memo if memo is not None else f"Transfering {asset} to {to}",
                },
            },
            expire_seconds=DEFAULT_EXPIRE_SECONDS,
        )
    except Exception as exc:
        raise wrap_error("Failed to transfer", exc) from exc
