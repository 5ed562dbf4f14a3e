"""
LangChain tool implementations for WAX blockchain operations.

Every tool takes a single JSON string as input, validates it against an
input schema and delegates to :mod:`wax_agentkit.operations`.  Tools are
fail-closed: nothing is raised to the agent loop.  The result is always a
JSON envelope, either ``{"status": "success", ...}`` or::

    {"status": "error", "message": "...", "code": "...", "details": ...}
"""
import json
import logging
from typing import Any, ClassVar, Optional

from langchain_core.callbacks import CallbackManagerForToolRun
from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ErrorCode, ValidationError, WaxAgentError
from ..formatting import format_account_info, format_contract_actions
from ..operations import (
    buy_ram,
    buy_ram_bytes,
    contract_execute_action,
    contract_list_actions,
    contract_list_tables,
    contract_read_table,
    get_balance,
    get_balance_other,
    sell_ram,
    transfer,
)
from ..types import Asset
from .schemas import (
    AccountInfoInput,
    BalanceInput,
    BalanceOtherInput,
    BuyRamInput,
    ContractInput,
    ExecuteActionInput,
    ReadTableInput,
    SellRamInput,
    SwapInput,
    TransferInput,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _success_response(**payload: Any) -> str:
    return json.dumps({"status": "success", **payload}, default=str)


def _error_response(
    message: str,
    code: str = ErrorCode.UNKNOWN_ERROR.value,
    details: Any = None,
) -> str:
    """Return a consistent JSON error payload."""
    return json.dumps(
        {"status": "error", "message": message, "code": code, "details": details or None},
        default=str,
    )


def _describe_validation_error(exc: PydanticValidationError) -> ValidationError:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            message = f"Missing required parameter: {field}"
        elif error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = f"Invalid {field} parameter: {error['msg']}"
        problems.append({"field": field or None, "message": message})
    return ValidationError(
        "; ".join(p["message"] for p in problems),
        details={"errors": problems},
    )


def _transaction_id(result: Any) -> Optional[str]:
    if isinstance(result, dict):
        return result.get("transaction_id")
    return None


# ---------------------------------------------------------------------------
# Base tool
# ---------------------------------------------------------------------------


class WaxTool(BaseTool):
    """Base class: JSON input parsing, validation and response envelopes.

    Subclasses set ``input_model`` and implement :meth:`_execute`, returning
    the success payload as a dict.
    """

    name: str = "wax_tool"
    description: str = ""

    toolkit: Any = Field(default=None, exclude=True)  # WaxAgentToolkit

    input_model: ClassVar[type[BaseModel]] = BaseModel
    # All-optional inputs may be sent as an empty string
    allow_empty_input: ClassVar[bool] = False
    error_code: ClassVar[str] = ErrorCode.UNKNOWN_ERROR.value
    failure_message: ClassVar[str] = "Tool execution failed"

    def __init__(self, toolkit: Any = None, **kwargs: Any) -> None:
        super().__init__(toolkit=toolkit, **kwargs)

    def parse_input(self, tool_input: Any) -> BaseModel:
        """Decode and validate raw tool input."""
        if isinstance(tool_input, str):
            if not tool_input.strip() and self.allow_empty_input:
                tool_input = "{}"
            try:
                tool_input = json.loads(tool_input)
            except json.JSONDecodeError as exc:
                raise WaxAgentError(
                    f"Invalid JSON input: {exc.msg}", code=ErrorCode.INVALID_JSON.value
                ) from exc
        if not isinstance(tool_input, dict):
            raise ValidationError("Tool input must be a JSON object")
        try:
            return self.input_model.model_validate(tool_input)
        except PydanticValidationError as exc:
            raise _describe_validation_error(exc) from exc

    def _execute(self, params: Any) -> dict[str, Any]:
        raise NotImplementedError

    def _run(
        self,
        tool_input: str = "",
        run_manager: Optional[CallbackManagerForToolRun] = None,
    ) -> str:
        try:
            params = self.parse_input(tool_input)
        except WaxAgentError as exc:
            return _error_response(exc.message, exc.code, exc.details)

        if self.toolkit is None:
            return _error_response(f"No WaxAgentToolkit configured on {type(self).__name__}")

        try:
            return _success_response(**self._execute(params))
        except WaxAgentError as exc:
            logger.warning("%s failed: %s", self.name, exc)
            code = self.error_code if exc.code == ErrorCode.UNKNOWN_ERROR.value else exc.code
            return _error_response(exc.message or self.failure_message, code, exc.details)
        except Exception as exc:
            logger.exception("%s failed", self.name)
            return _error_response(str(exc) or self.failure_message, self.error_code)


# ---------------------------------------------------------------------------
# Balances and account
# ---------------------------------------------------------------------------


class WaxBalanceTool(WaxTool):
    """Check the balance of the agent's own account, in WAX or a token."""

    name: str = "wax_balance"
    description: str = (
        "Get the balance of your WAX account or token.\n\n"
        "If no tokenContract and tokenSymbol are provided, the balance will be in WAX.\n\n"
        "Inputs (input is a JSON string):\n"
        'tokenContract: string, eg "eosio.token" (optional)\n'
        'tokenSymbol: string, eg "TOKEN" (optional)'
    )
    input_model: ClassVar[type[BaseModel]] = BalanceInput
    allow_empty_input: ClassVar[bool] = True

    def _execute(self, params: BalanceInput) -> dict[str, Any]:
        balance = get_balance(self.toolkit, params.token_contract, params.token_symbol)
        has_token = params.token_contract and params.token_symbol
        return {
            "balance": balance,
            "token": f"{params.token_symbol}@{params.token_contract}" if has_token else "WAX",
        }


class WaxBalanceOtherTool(WaxTool):
    """Check the balance of any WAX account."""

    name: str = "wax_balance_other"
    description: str = (
        "Handles balance checks for WAX accounts.\n"
        'Expects a JSON input with "accountName" (optional), "tokenContract" (optional), '
        'and "tokenSymbol" (optional).\n'
        "Example: {} for WAX balance of my account\n"
        'Example: {"tokenContract": "custom.token", "tokenSymbol": "TOKEN"} for token balance of my account\n'
        'Example: {"accountName": "sentnltestin"} for WAX balance of sentnltestin account\n'
        'Example: {"accountName": "sentnltestin", "tokenContract": "eosio.token", "tokenSymbol": "TOKEN"} '
        "for token balance of sentnltestin account"
    )
    input_model: ClassVar[type[BaseModel]] = BalanceOtherInput
    allow_empty_input: ClassVar[bool] = True

    def _execute(self, params: BalanceOtherInput) -> dict[str, Any]:
        account = params.account_name or self.toolkit.account_name
        balance = get_balance_other(self.toolkit, account, params.token_contract, params.token_symbol)
        has_token = params.token_contract and params.token_symbol
        return {
            "balance": balance,
            "account": account,
            "token": f"{params.token_symbol}@{params.token_contract}" if has_token else "WAX",
        }


class WaxGetAccountInfoTool(WaxTool):
    """Retrieve and format account information."""

    name: str = "wax_get_account_info"
    description: str = (
        "Retrieve account information from the WAX blockchain.\n\n"
        'Use this for questions like "What\'s my account info?" or '
        '"I need to check another account\'s details".\n\n'
        "Input for getting account information:\n"
        "- For your own account: {}\n"
        '- For another account: {"account_name":"account.wam"}'
    )
    input_model: ClassVar[type[BaseModel]] = AccountInfoInput
    allow_empty_input: ClassVar[bool] = True

    def _execute(self, params: AccountInfoInput) -> dict[str, Any]:
        account_name = params.account_name or self.toolkit.account_name
        account = self.toolkit.get_account(account_name)
        return {
            "message": f"Successfully retrieved information for account {account_name}",
            "account": format_account_info(account),
        }


# ---------------------------------------------------------------------------
# Signing tools
# ---------------------------------------------------------------------------


class WaxBuyRamTool(WaxTool):
    """Buy RAM for the agent's account, by WAX amount or by bytes."""

    name: str = "wax_buy_ram"
    description: str = (
        "Buy RAM for your WAX account.\n\n"
        'Use this for questions like "How do I buy RAM?" or "I need more RAM for my account".\n\n'
        "You can buy RAM in two ways:\n"
        '1. Using WAX tokens: {"buy_ram_amount":"1.00000000 WAX"}\n'
        '2. Using specific bytes: {"buy_ram_bytes":8192}'
    )
    input_model: ClassVar[type[BaseModel]] = BuyRamInput

    def _execute(self, params: BuyRamInput) -> dict[str, Any]:
        if params.buy_ram_amount:
            amount = Asset.parse(params.buy_ram_amount)
            result = buy_ram(self.toolkit, amount)
            return {
                "message": f"Successfully bought RAM with {params.buy_ram_amount}",
                "transaction": result,
            }
        result = buy_ram_bytes(self.toolkit, params.buy_ram_bytes)
        return {
            "message": f"Successfully bought {params.buy_ram_bytes} bytes of RAM",
            "transaction": result,
        }


class WaxSellRamTool(WaxTool):
    """Sell RAM from the agent's account."""

    name: str = "wax_sell_ram"
    description: str = (
        "Sell RAM from your WAX account to get WAX tokens back.\n\n"
        'Use this for questions like "How do I sell RAM?" or "I want to get WAX back from my RAM".\n\n'
        'Input: {"sell_ram_bytes":8192}\n'
        'Example: To sell 8KB of RAM: {"sell_ram_bytes":8192}'
    )
    input_model: ClassVar[type[BaseModel]] = SellRamInput

    def _execute(self, params: SellRamInput) -> dict[str, Any]:
        result = sell_ram(self.toolkit, params.sell_ram_bytes)
        return {
            "message": f"Successfully sold {params.sell_ram_bytes} bytes of RAM",
            "transaction": result,
        }


class WaxTransferTool(WaxTool):
    """Transfer tokens from the agent's account to another account."""

    name: str = "wax_transfer"
    description: str = (
        "Handles token transfers between WAX accounts.\n"
        'Expects a JSON input with "token_quantity" (amount to transfer), "token_symbol" (e.g. WAX), '
        'and "to" (recipient account name). Optional: "token_contract" (default eosio.token), "memo", '
        '"precision" (token decimals, default 8 for WAX).\n'
        'Example: {"token_quantity": 10, "token_symbol": "WAX", "to": "recipient1"}\n'
        'Example: {"token_quantity": 5, "token_symbol": "TLM", "to": "recipient1", '
        '"token_contract": "alien.worlds", "precision": 4}'
    )
    input_model: ClassVar[type[BaseModel]] = TransferInput

    def _execute(self, params: TransferInput) -> dict[str, Any]:
        quantity = Asset.from_amount(params.token_quantity, params.token_symbol, params.precision)
        result = transfer(
            self.toolkit,
            quantity.amount,
            quantity.symbol,
            params.to,
            contract=params.token_contract,
            precision=quantity.precision,
            memo=params.memo,
        )
        return {
            "message": f"Successfully transferred {quantity} to {params.to}",
            "transaction": result,
        }


# ---------------------------------------------------------------------------
# Contracts
# ---------------------------------------------------------------------------


class WaxContractListActionTool(WaxTool):
    """List the actions of a contract with their parameters."""

    name: str = "wax_contract_list_action"
    description: str = (
        "List all available actions of a smart contract on the WAX blockchain.\n\n"
        "Use this to discover what operations a contract supports and which "
        "parameters each action requires.\n\n"
        'Input: {"contract_name":"eosio.token"}'
    )
    input_model: ClassVar[type[BaseModel]] = ContractInput
    failure_message: ClassVar[str] = "Failed to list contract actions"

    def _execute(self, params: ContractInput) -> dict[str, Any]:
        actions = contract_list_actions(self.toolkit, params.contract_name)
        if not actions:
            return {"message": f"No actions found for contract {params.contract_name}", "actions": []}
        return {
            "message": f"Successfully retrieved {len(actions)} actions for contract {params.contract_name}",
            "actions": format_contract_actions(actions),
        }


class WaxContractListTablesTool(WaxTool):
    """List the tables of a contract."""

    name: str = "wax_contract_list_tables"
    description: str = (
        "List all available tables of a smart contract on the WAX blockchain.\n\n"
        "Use this to discover which state a contract exposes before reading a table.\n\n"
        'Input: {"contract_name":"eosio.token"}'
    )
    input_model: ClassVar[type[BaseModel]] = ContractInput
    failure_message: ClassVar[str] = "Failed to list contract tables"

    def _execute(self, params: ContractInput) -> dict[str, Any]:
        tables = contract_list_tables(self.toolkit, params.contract_name)
        if not tables:
            return {"message": f"No tables found for contract {params.contract_name}", "tables": []}
        return {
            "message": f"Successfully retrieved {len(tables)} tables for contract {params.contract_name}",
            "tables": tables,
        }


class WaxContractReadTableTool(WaxTool):
    """Read the rows of a contract table."""

    name: str = "wax_contract_read_table"
    description: str = (
        "Read data from a table of a smart contract on the WAX blockchain.\n\n"
        "Input format:\n"
        '{"contract_name": "eosio.token", "table_name": "accounts", '
        '"scope": "optional scope, defaults to the contract", "limit": 10}\n\n'
        'Example: {"contract_name":"eosio.token","table_name":"stat","scope":"WAX"}'
    )
    input_model: ClassVar[type[BaseModel]] = ReadTableInput
    failure_message: ClassVar[str] = "Failed to read contract table"

    def _execute(self, params: ReadTableInput) -> dict[str, Any]:
        rows = contract_read_table(
            self.toolkit,
            params.contract_name,
            params.table_name,
            scope=params.scope,
            limit=params.limit,
        )
        return {
            "message": (
                f"Successfully read {len(rows)} rows from table {params.table_name} "
                f"of contract {params.contract_name}"
            ),
            "rows": rows,
        }


class WaxContractExecuteActionTool(WaxTool):
    """Execute an action on any contract as the agent's account."""

    name: str = "wax_contract_execute_action"
    description: str = (
        "Execute an action on a WAX blockchain smart contract.\n\n"
        "Input format:\n"
        '{"contract_name": "eosio.token", "action_name": "transfer", '
        '"params": {"key1": "value1"}}\n\n'
        "Examples:\n"
        '1. Transfer WAX: {"contract_name":"eosio.token","action_name":"transfer",'
        '"params":{"from":"user1.wam","to":"user2.wam","quantity":"1.00000000 WAX","memo":"Test transfer"}}\n'
        '2. Stake WAX: {"contract_name":"eosio","action_name":"delegatebw",'
        '"params":{"from":"user1.wam","receiver":"user1.wam","stake_net_quantity":"1.00000000 WAX",'
        '"stake_cpu_quantity":"1.00000000 WAX","transfer":false}}'
    )
    input_model: ClassVar[type[BaseModel]] = ExecuteActionInput
    failure_message: ClassVar[str] = "Failed to execute contract action"

    def _execute(self, params: ExecuteActionInput) -> dict[str, Any]:
        result = contract_execute_action(
            self.toolkit, params.contract_name, params.action_name, params.params or {}
        )
        tx_id = _transaction_id(result)
        return {
            "message": f"Successfully executed action {params.action_name} on contract {params.contract_name}",
            "transaction_id": tx_id,
            "transaction": self.toolkit.explorer_url(tx_id),
        }


class AlcorSwapActionTool(WaxTool):
    """Swap tokens through the Alcor exchange swap contract."""

    name: str = "alcor_swap_action"
    description: str = (
        "Execute a token swap using Alcor's smart contract on the WAX blockchain.\n\n"
        "Input format:\n"
        '{"contract_name": "swap.alcor", "action_name": "swap", "params": {'
        '"owner": "user1.wam", "amount_in": "1.00000000 WAX", '
        '"min_amount_out": "0.1000 TLM", "path": ["WAX", "TLM"]}}'
    )
    input_model: ClassVar[type[BaseModel]] = SwapInput
    error_code: ClassVar[str] = ErrorCode.SWAP_ERROR.value
    failure_message: ClassVar[str] = "Swap failed"

    def _execute(self, params: SwapInput) -> dict[str, Any]:
        result = contract_execute_action(
            self.toolkit, params.contract_name, params.action_name, params.params
        )
        tx_id = _transaction_id(result)
        return {
            "message": f"Swap executed: {params.action_name} on {params.contract_name}",
            "transaction_id": tx_id,
            "transaction": self.toolkit.explorer_url(tx_id),
        }
