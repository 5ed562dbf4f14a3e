"""Currency balance lookups."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from ..errors import wrap_error
from ..types import TOKEN_CONTRACT, WAX_SYMBOL, validate_name

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit

logger = logging.getLogger(__name__)


def _first_balance(balances: Optional[list[str]]) -> Optional[str]:
    return balances[0] if balances else None


def get_balance(
    toolkit: "WaxAgentToolkit",
    token_contract: Optional[str] = None,
    token_symbol: Optional[str] = None,
) -> str:
    """Balance of the toolkit's own account.

    Returns the WAX balance unless both ``token_contract`` and
    ``token_symbol`` are given.
    """
    try:
        client = toolkit.get_session().client
        if not token_contract or not token_symbol:
            balances = client.get_currency_balance(
                toolkit.account_name, code=TOKEN_CONTRACT, symbol=WAX_SYMBOL
            )
            return _first_balance(balances) or "0.00000000 WAX"

        validate_name(token_contract, "token contract")
        balances = client.get_currency_balance(
            toolkit.account_name, code=token_contract, symbol=token_symbol
        )
        return _first_balance(balances) or f"0.0000 {token_symbol}"
    except Exception as exc:
        raise wrap_error("Error getting balance", exc) from exc


def get_balance_other(
    toolkit: "WaxAgentToolkit",
    account_name: str,
    token_contract: Optional[str] = None,
    token_symbol: Optional[str] = None,
) -> str:
    """Balance of any account, in WAX or in the given token."""
    try:
        validate_name(account_name)
        client = toolkit.get_session().client
        if token_contract and token_symbol:
            validate_name(token_contract, "token contract")
            balances = client.get_currency_balance(account_name, code=token_contract, symbol=token_symbol)
        else:
            balances = client.get_currency_balance(account_name, code=TOKEN_CONTRACT, symbol=WAX_SYMBOL)
        return _first_balance(balances) or "0.0000"
    except Exception as exc:
        token = f" and token {token_symbol}@{token_contract}" if token_contract else ""
        raise wrap_error(f"Error fetching on-chain balance for {account_name}{token}", exc) from exc


def get_token_balances(
    toolkit: "WaxAgentToolkit",
    account_name: Optional[str] = None,
    tokens: Iterable[tuple[str, str]] = (),
) -> dict[str, Any]:
    """WAX balance plus every listed ``(contract, symbol)`` the account holds.

    There is no chain-wide token index, so only the tokens passed in are
    checked.  A token that cannot be queried is skipped.
    """
    target = account_name or toolkit.account_name
    try:
        validate_name(target)
        client = toolkit.get_session().client
        wax = _first_balance(client.get_currency_balance(target, code=TOKEN_CONTRACT, symbol=WAX_SYMBOL))
    except Exception as exc:
        raise wrap_error(f"Error getting token balances for {target}", exc) from exc

    found = []
    for contract, symbol in tokens:
        try:
            balance = _first_balance(client.get_currency_balance(target, code=contract, symbol=symbol))
        except Exception as exc:
            logger.debug("No %s@%s balance found for %s: %s", symbol, contract, target, exc)
            continue
        if balance:
            found.append({"contract": contract, "symbol": symbol, "balance": balance})

    return {"wax": wax or "0.0000 WAX", "tokens": found}
