"""
Input schemas for the WAX LangChain tools.

Tool input arrives as a JSON string; after decoding, the object is validated
against one of these models.  String and integer fields are strict so that
values of the wrong JSON type are rejected rather than coerced.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator


class _ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BalanceInput(_ToolInput):
    """Input for wax_balance."""

    token_contract: Optional[StrictStr] = Field(
        default=None, alias="tokenContract", description='Token contract, e.g. "eosio.token"'
    )
    token_symbol: Optional[StrictStr] = Field(
        default=None, alias="tokenSymbol", description='Token symbol, e.g. "TOKEN"'
    )


class BalanceOtherInput(BalanceInput):
    """Input for wax_balance_other."""

    account_name: Optional[StrictStr] = Field(
        default=None, alias="accountName", description="Account to check; defaults to the agent's"
    )


class BuyRamInput(_ToolInput):
    """Input for wax_buy_ram: exactly one of the two fields is used."""

    buy_ram_amount: Optional[StrictStr] = Field(
        default=None, description='WAX to spend on RAM, e.g. "1.00000000 WAX"'
    )
    buy_ram_bytes: Optional[StrictInt] = Field(default=None, description="Bytes of RAM to buy, e.g. 8192")

    @field_validator("buy_ram_bytes")
    @classmethod
    def _positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("Invalid bytes value. Must be a positive number.")
        return value

    @model_validator(mode="after")
    def _one_of(self) -> "BuyRamInput":
        if not self.buy_ram_amount and self.buy_ram_bytes is None:
            raise ValueError(
                "Invalid input. Must provide either 'buy_ram_amount' or 'buy_ram_bytes' parameter."
            )
        return self


class SellRamInput(_ToolInput):
    """Input for wax_sell_ram."""

    sell_ram_bytes: StrictInt = Field(description="Bytes of RAM to sell, e.g. 8192")

    @field_validator("sell_ram_bytes")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Invalid bytes value. Must be a positive number.")
        return value


class TransferInput(_ToolInput):
    """Input for wax_transfer."""

    token_quantity: float = Field(strict=True, description="Amount to transfer, e.g. 10")
    token_symbol: StrictStr = Field(description='Token symbol, e.g. "WAX"')
    to: StrictStr = Field(description="Recipient account name")
    token_contract: StrictStr = Field(default="eosio.token", description="Token contract")
    memo: Optional[StrictStr] = Field(default=None, description="Transfer memo")
    precision: StrictInt = Field(default=8, ge=0, le=18, description="Token decimals, e.g. 8 for WAX, 4 for TLM")

    @field_validator("token_quantity")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Invalid token quantity. Must be a positive number.")
        return value


class AccountInfoInput(_ToolInput):
    """Input for wax_get_account_info."""

    account_name: Optional[StrictStr] = Field(default=None, description="Account to look up")


class ContractInput(_ToolInput):
    """Input for tools that only need a contract name."""

    contract_name: StrictStr = Field(min_length=1, description='Contract account, e.g. "eosio.token"')


class ReadTableInput(ContractInput):
    """Input for wax_contract_read_table."""

    table_name: StrictStr = Field(min_length=1, description='Table to read, e.g. "accounts"')
    scope: Optional[StrictStr] = Field(default=None, description="Table scope; defaults to the contract")
    limit: Optional[StrictInt] = Field(default=None, gt=0, description="Maximum number of rows")


class ExecuteActionInput(ContractInput):
    """Input for wax_contract_execute_action."""

    action_name: StrictStr = Field(min_length=1, description='Action to execute, e.g. "transfer"')
    params: Optional[dict[str, Any]] = Field(default=None, description="Action data")


class SwapInput(ExecuteActionInput):
    """Input for alcor_swap_action: ``params`` is mandatory."""

    contract_name: StrictStr = Field(default="swap.alcor", min_length=1, description="Alcor swap contract")
    action_name: StrictStr = Field(default="swap", min_length=1, description='Usually "swap"')
    params: dict[str, Any] = Field(description="Swap parameters")
