"""Token creation on ``eosio.token``."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from ..errors import wrap_error
from ..session import DEFAULT_EXPIRE_SECONDS
from ..types import TOKEN_CONTRACT, Asset

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit


def deploy_token(
    toolkit: "WaxAgentToolkit",
    symbol: str,
    supply: Union[str, int, float],
    precision: int = 4,
) -> dict[str, Any]:
    """Create ``symbol`` with maximum ``supply`` and issue all of it to the agent.

    Both actions go out in a single transaction; the account must be allowed
    to act on the token contract.
    """
    try:
        maximum = Asset.from_amount(supply, symbol, precision)
        session = toolkit.get_session()
        auth = session.authorization()
        return session.transact(
            [
                {
                    "account": TOKEN_CONTRACT,
                    "name": "create",
                    "authorization": auth,
                    "data": {"issuer": toolkit.account_name, "maximum_supply": str(maximum)},
                },
                {
                    "account": TOKEN_CONTRACT,
                    "name": "issue",
                    "authorization": auth,
                    "data": {"to": toolkit.account_name, "quantity": str(maximum), "memo": "Initial supply"},
                },
            ],
            expire_seconds=DEFAULT_EXPIRE_SECONDS,
        )
    except Exception as exc:
        raise wrap_error("Token deployment failed", exc) from exc
