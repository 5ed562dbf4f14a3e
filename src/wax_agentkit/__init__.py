"""
wax-agentkit: WAX blockchain tools for LLM agents.

Wraps account, token, RAM and contract operations on the WAX chain and
exposes them as LangChain tools.

Quick start::

    from wax_agentkit import WaxAgentToolkit
    from wax_agentkit.langchain import create_wax_tools

    agent = WaxAgentToolkit(account_name="mywaxaccount", private_key="5K...", network="testnet")
    tools = create_wax_tools(agent)
"""

__version__ = "0.1.0"

from .agent import WaxAgentToolkit
from .config import WaxSettings, get_settings
from .contract import Contract
from .errors import (
    AccountNotFoundError,
    ActionNotFoundError,
    ContractError,
    ErrorCode,
    NodeDiscoveryError,
    TableNotFoundError,
    TransactionError,
    ValidationError,
    WaxAgentError,
)
from .session import WaxSession
from .types import Asset, Network, NodeType

__all__ = [
    "WaxAgentToolkit",
    "WaxSession",
    "Contract",
    "WaxSettings",
    "get_settings",
    # Types
    "Asset",
    "Network",
    "NodeType",
    # Errors
    "ErrorCode",
    "WaxAgentError",
    "ValidationError",
    "AccountNotFoundError",
    "ContractError",
    "ActionNotFoundError",
    "TableNotFoundError",
    "TransactionError",
    "NodeDiscoveryError",
]
