"""
WaxToolkit -- one-line setup for all WAX LangChain tools.

Usage::

    from wax_agentkit import WaxAgentToolkit
    from wax_agentkit.langchain import WaxToolkit

    agent = WaxAgentToolkit(account_name="mywaxaccount", private_key="5K...")
    tools = WaxToolkit(agent).get_tools()

    # Pass `tools` to any LangChain / LangGraph agent
"""
from __future__ import annotations

from langchain_core.tools import BaseTool

from ..agent import WaxAgentToolkit
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

READ_ONLY_TOOLS: tuple[type[WaxTool], ...] = (
    WaxBalanceTool,
    WaxBalanceOtherTool,
    WaxGetAccountInfoTool,
    WaxContractListActionTool,
    WaxContractListTablesTool,
    WaxContractReadTableTool,
)

SIGNING_TOOLS: tuple[type[WaxTool], ...] = (
    WaxBuyRamTool,
    WaxSellRamTool,
    WaxTransferTool,
    WaxContractExecuteActionTool,
    AlcorSwapActionTool,
)


class WaxToolkit:
    """Create the WAX LangChain tools for one agent account.

    Args:
        agent: The :class:`WaxAgentToolkit` every tool operates on.
        read_only: Leave out every tool that signs a transaction.
    """

    def __init__(self, agent: WaxAgentToolkit, read_only: bool = False) -> None:
        self.agent = agent
        self.read_only = read_only

    def get_tools(self) -> list[BaseTool]:
        """Return the configured tools, ready to hand to an agent."""
        tool_classes = READ_ONLY_TOOLS if self.read_only else READ_ONLY_TOOLS + SIGNING_TOOLS
        return [tool_cls(self.agent) for tool_cls in tool_classes]

    def __repr__(self) -> str:
        return f"WaxToolkit(account_name={self.agent.account_name!r}, read_only={self.read_only})"


def create_wax_tools(agent: WaxAgentToolkit, read_only: bool = False) -> list[BaseTool]:
    """Shortcut for ``WaxToolkit(agent, read_only).get_tools()``."""
    return WaxToolkit(agent, read_only=read_only).get_tools()
