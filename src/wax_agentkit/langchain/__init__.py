"""
LangChain integration for wax-agentkit.

Quick start::

    from wax_agentkit import WaxAgentToolkit
    from wax_agentkit.langchain import WaxToolkit

    agent = WaxAgentToolkit(account_name="mywaxaccount", private_key="5K...")
    tools = WaxToolkit(agent).get_tools()
"""

from .callbacks import WaxCallbackHandler
from .toolkit import WaxToolkit, create_wax_tools
from .tools import (
    AlcorSwapActionTool,
    WaxBalanceOtherTool,
    WaxBalanceTool,
    WaxBuyRamTool,
    WaxContractExecuteActionTool,
    WaxContractListActionTool,
    WaxContractListTablesTool,
    WaxContractReadTableTool,
    WaxGetAccountInfoTool,
    WaxSellRamTool,
    WaxTool,
    WaxTransferTool,
)

__all__ = [
    # Toolkit
    "WaxToolkit",
    "create_wax_tools",
    # Tools
    "WaxTool",
    "WaxBalanceTool",
    "WaxBalanceOtherTool",
    "WaxGetAccountInfoTool",
    "WaxBuyRamTool",
    "WaxSellRamTool",
    "WaxTransferTool",
    "WaxContractListActionTool",
    "WaxContractListTablesTool",
    "WaxContractReadTableTool",
    "WaxContractExecuteActionTool",
    "AlcorSwapActionTool",
    # Callbacks
    "WaxCallbackHandler",
]
