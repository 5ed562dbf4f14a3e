"""Blockchain operations performed on behalf of a :class:`~wax_agentkit.WaxAgentToolkit`."""

from .account import get_account
from .balance import get_balance, get_balance_other, get_token_balances
from .contract import (
    contract_execute_action,
    contract_list_actions,
    contract_list_tables,
    contract_read_table,
)
from .ram import buy_ram, buy_ram_bytes, sell_ram
from .token import deploy_token
from .transfer import transfer

__all__ = [
    "get_account",
    "get_balance",
    "get_balance_other",
    "get_token_balances",
    "buy_ram",
    "buy_ram_bytes",
    "sell_ram",
    "transfer",
    "deploy_token",
    "contract_list_actions",
    "contract_list_tables",
    "contract_read_table",
    "contract_execute_action",
]
