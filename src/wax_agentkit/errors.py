"""Error models for wax-agentkit."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Codes surfaced in tool error envelopes."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INVALID_JSON = "INVALID_JSON"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    CONTRACT_ERROR = "CONTRACT_ERROR"
    ACTION_NOT_FOUND = "ACTION_NOT_FOUND"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"
    NODE_DISCOVERY_FAILED = "NODE_DISCOVERY_FAILED"
    SWAP_ERROR = "SWAP_ERROR"


class WaxAgentError(Exception):
    """Base exception for wax-agentkit."""

    default_code = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code.value
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }

    def with_prefix(self, prefix: str) -> "WaxAgentError":
        """Return a copy of this error whose message starts with ``prefix``."""
        return type(self)(f"{prefix}: {self.message}", code=self.code, details=self.details)


class ValidationError(WaxAgentError):
    """Invalid input supplied by the caller."""

    default_code = ErrorCode.VALIDATION_ERROR


class AccountNotFoundError(WaxAgentError):
    """Account does not exist on chain."""

    default_code = ErrorCode.ACCOUNT_NOT_FOUND


class ContractError(WaxAgentError):
    """Contract could not be loaded or queried."""

    default_code = ErrorCode.CONTRACT_ERROR


class ActionNotFoundError(ContractError):
    """Contract ABI has no action with the requested name."""

    default_code = ErrorCode.ACTION_NOT_FOUND


class TableNotFoundError(ContractError):
    """Contract ABI has no table with the requested name."""

    default_code = ErrorCode.TABLE_NOT_FOUND


class TransactionError(WaxAgentError):
    """Signing or broadcasting a transaction failed."""

    default_code = ErrorCode.TRANSACTION_FAILED


class NodeDiscoveryError(WaxAgentError):
    """No API node could be resolved for the network."""

    default_code = ErrorCode.NODE_DISCOVERY_FAILED


def wrap_error(prefix: str, exc: BaseException) -> WaxAgentError:
    """Prefix an arbitrary exception, keeping the code of SDK errors."""
    if isinstance(exc, WaxAgentError):
        return exc.with_prefix(prefix)
    return WaxAgentError(f"{prefix}: {exc}")
