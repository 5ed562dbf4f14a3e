"""RAM market actions on the ``eosio`` system contract."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from ..errors import ValidationError, wrap_error
from ..types import SYSTEM_CONTRACT, Asset

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit


def _positive_bytes(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("Invalid bytes value. Must be a positive number.", details={"bytes": value})
    return value


def _system_action(toolkit: "WaxAgentToolkit", name: str, data: dict[str, Any]) -> dict[str, Any]:
    # Fails with AccountNotFoundError before anything is signed
    toolkit.get_account()
    session = toolkit.get_session()
    return session.transact({
        "account": SYSTEM_CONTRACT,
        "name": name,
        "authorization": session.authorization(),
        "data": data,
    })


def buy_ram(toolkit: "WaxAgentToolkit", amount: Union[Asset, str]) -> dict[str, Any]:
    """Spend ``amount`` (e.g. ``"1.00000000 WAX"``) on RAM for the agent's account."""
    try:
        quant = amount if isinstance(amount, Asset) else Asset.parse(amount)
        return _system_action(toolkit, "buyram", {
            "payer": toolkit.account_name,
            "receiver": toolkit.account_name,
            "quant": str(quant),
        })
    except Exception as exc:
        raise wrap_error("Failed to buy RAM", exc) from exc


def buy_ram_bytes(toolkit: "WaxAgentToolkit", num_bytes: int) -> dict[str, Any]:
    """Buy exactly ``num_bytes`` of RAM for the agent's account."""
    try:
        return _system_action(toolkit, "buyrambytes", {
            "payer": toolkit.account_name,
            "receiver": toolkit.account_name,
            "bytes": _positive_bytes(num_bytes),
        })
    except Exception as exc:
        raise wrap_error("Failed to buy RAM bytes", exc) from exc


def sell_ram(toolkit: "WaxAgentToolkit", num_bytes: int) -> dict[str, Any]:
    """Sell ``num_bytes`` of the agent's RAM back to the market."""
    try:
        return _system_action(toolkit, "sellram", {
            "account": toolkit.account_name,
            "bytes": _positive_bytes(num_bytes),
        })
    except Exception as exc:
        raise wrap_error("Failed to sell RAM", exc) from exc
