"""
WaxAgentToolkit -- the account handle every operation and tool works through.

Usage::

    from wax_agentkit import WaxAgentToolkit

    agent = WaxAgentToolkit(
        account_name="mywaxaccount",
        private_key="5K...",
        network="testnet",
    )
    session = agent.get_session()
"""
from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Any, Optional, Union

from .network import explorer_url, get_node
from .operations import account as account_ops
from .session import WaxSession, load_key
from .types import Network, NodeType, validate_name

if TYPE_CHECKING:
    from .config import WaxSettings

logger = logging.getLogger(__name__)


class WaxAgentToolkit:
    """Main class for interacting with the WAX blockchain.

    Holds the signing account and knows how to reach a node.  A fresh
    :class:`WaxSession` is created for each call to :meth:`get_session`.

    Args:
        account_name: Account that signs transactions.
        private_key: WIF private key of the account's ``active`` permission.
        rpc_url: Chain API endpoint.  When omitted a node is discovered via
            NodePulse for ``network``/``node_type``.
        chain_id: Chain id; defaults to the network's.
        network: ``mainnet`` or ``testnet``.
        node_type: NodePulse node kind used for discovery.
        config: Extra settings.  A plain string is accepted for backwards
            compatibility and treated as the OpenAI API key.
    """

    def __init__(
        self,
        account_name: str,
        private_key: str,
        rpc_url: Optional[str] = None,
        chain_id: Optional[str] = None,
        network: Union[Network, str] = Network.TESTNET,
        node_type: Union[NodeType, str] = NodeType.HYPERION,
        config: Union[dict[str, Any], str, None] = None,
        *,
        nodepulse_url: Optional[str] = None,
        node_count: int = 5,
        request_timeout: float = 10.0,
    ) -> None:
        self.account_name = validate_name(account_name)
        self.private_key = private_key
        self.wallet_address = load_key(private_key).to_public()
        self.rpc_url = rpc_url
        self.network = Network(network)
        self.node_type = NodeType(node_type)
        self.chain_id = chain_id or self.network.chain_id
        self.nodepulse_url = nodepulse_url
        self.node_count = node_count
        self.request_timeout = request_timeout

        if isinstance(config, str):
            warnings.warn(
                "Passing the OpenAI API key as a string is deprecated; "
                "pass config={'OPENAI_API_KEY': ...} instead.",
                DeprecationWarning,
                stacklevel=2,
            )
            config = {"OPENAI_API_KEY": config}
        self.config: dict[str, Any] = dict(config or {})

    @classmethod
    def from_settings(cls, settings: "WaxSettings") -> "WaxAgentToolkit":
        """Build a toolkit from :class:`~wax_agentkit.config.WaxSettings`."""
        config = {"OPENAI_API_KEY": settings.openai_api_key} if settings.openai_api_key else None
        return cls(
            account_name=settings.account_name or "",
            private_key=settings.private_key or "",
            rpc_url=settings.rpc_url,
            chain_id=settings.resolved_chain_id(),
            network=settings.network,
            node_type=settings.node_type,
            config=config,
            nodepulse_url=settings.nodepulse_url,
            node_count=settings.node_count,
            request_timeout=settings.request_timeout,
        )

    def get_node(self) -> str:
        """Return the API endpoint to use for the next session."""
        if self.rpc_url:
            return self.rpc_url
        kwargs: dict[str, Any] = {"count": self.node_count, "timeout": self.request_timeout}
        if self.nodepulse_url:
            kwargs["api_url"] = self.nodepulse_url
        return get_node(self.network, self.node_type, **kwargs)

    def get_session(self) -> WaxSession:
        """Create a new signing session for this account."""
        return WaxSession(
            chain_id=self.chain_id,
            url=self.get_node(),
            actor=self.account_name,
            private_key=self.private_key,
        )

    def get_account(self, account_name: Optional[str] = None) -> dict[str, Any]:
        """Fetch the on-chain account object (defaults to this account)."""
        return account_ops.get_account(self, account_name)

    def explorer_url(self, transaction_id: Optional[str]) -> str:
        return explorer_url(self.network, transaction_id)

    def __repr__(self) -> str:
        return f"WaxAgentToolkit(account_name={self.account_name!r}, network={self.network.value!r})"
