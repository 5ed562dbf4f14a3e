"""Account lookups."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..errors import AccountNotFoundError, wrap_error
from ..types import validate_name

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit


def get_account(toolkit: "WaxAgentToolkit", account_name: Optional[str] = None) -> dict[str, Any]:
    """Fetch the on-chain account object (defaults to the agent's account)."""
    name = account_name or toolkit.account_name
    try:
        validate_name(name)
        response = toolkit.get_session().client.get_account(name)
        if not response:
            raise AccountNotFoundError(f"Account {name} not found", details={"account": name})
    except Exception as exc:
        raise wrap_error("Failed to get account information", exc) from exc
    return response
