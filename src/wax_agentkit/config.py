"""Configuration for wax-agentkit."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import Network, NodeType

NODEPULSE_API_URL = "https://nodes.nodepulse.co/nodes"


class WaxSettings(BaseSettings):
    """Toolkit settings with environment variable support."""

    # 'extra=ignore' allows unrelated WAX_* variables in the environment
    model_config = SettingsConfigDict(
        env_prefix="WAX_",
        env_file=".env",
        extra="ignore",
    )

    # Signing account
    account_name: Optional[str] = None
    private_key: Optional[str] = None

    # Chain endpoint; rpc_url=None means discover a node through NodePulse
    rpc_url: Optional[str] = None
    chain_id: Optional[str] = None
    network: Network = Network.TESTNET
    node_type: NodeType = NodeType.HYPERION

    # Node discovery
    nodepulse_url: str = NODEPULSE_API_URL
    node_count: int = 5
    request_timeout: float = 10.0

    # Agent loop
    openai_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("WAX_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )
    model: str = "gpt-4o-mini"
    temperature: float = 0.3

    log_level: str = "INFO"

    def resolved_chain_id(self) -> str:
        """Return the configured chain id, defaulting to the network's."""
        return self.chain_id or self.network.chain_id

    def missing_required(self, include_llm: bool = False) -> list[str]:
        """Names of environment variables that must be set before signing."""
        missing = []
        if not self.account_name:
            missing.append("WAX_ACCOUNT_NAME")
        if not self.private_key:
            missing.append("WAX_PRIVATE_KEY")
        if include_llm and not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        return missing


@lru_cache
def get_settings() -> WaxSettings:
    return WaxSettings()
