"""
Node discovery for WAX networks.

API endpoints come from the NodePulse registry.  When the registry is
unreachable or returns nothing usable, a well-known public endpoint for the
network is used instead.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from .config import NODEPULSE_API_URL
from .errors import NodeDiscoveryError
from .types import Network, NodeType

logger = logging.getLogger(__name__)

DEFAULT_NODES = {
    Network.MAINNET: "https://wax.greymass.com",
    Network.TESTNET: "https://testnet.waxsweden.org",
}


def _extract_url(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        for key in ("url", "endpoint", "node"):
            value = entry.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def fetch_nodes(
    network: Union[Network, str],
    node_type: Union[NodeType, str],
    *,
    api_url: str = NODEPULSE_API_URL,
    count: int = 5,
    timeout: float = 10.0,
) -> list[str]:
    """Ask NodePulse for up to ``count`` node URLs."""
    network = Network(network)
    node_type = NodeType(node_type)
    try:
        response = httpx.get(
            api_url,
            params={"type": node_type.value, "network": network.value, "count": count},
            timeout=timeout,
        )
        response.raise_for_status()
        body = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise NodeDiscoveryError(
            f"NodePulse lookup failed for {network.value}/{node_type.value}: {exc}",
            details={"api_url": api_url},
        ) from exc

    if isinstance(body, dict):
        body = body.get("nodes", [])
    if not isinstance(body, list):
        raise NodeDiscoveryError(f"Unexpected NodePulse response: {body!r}")

    urls = [url.rstrip("/") for url in map(_extract_url, body) if url]
    return urls[:count]


def get_node(
    network: Union[Network, str] = Network.TESTNET,
    node_type: Union[NodeType, str] = NodeType.HYPERION,
    *,
    api_url: str = NODEPULSE_API_URL,
    count: int = 5,
    timeout: float = 10.0,
) -> str:
    """Return one API node URL for ``network``.

    Falls back to the network's default endpoint if discovery fails.
    """
    network = Network(network)
    try:
        nodes = fetch_nodes(network, node_type, api_url=api_url, count=count, timeout=timeout)
    except NodeDiscoveryError as exc:
        logger.warning("%s; using default node", exc.message)
        return DEFAULT_NODES[network]

    if not nodes:
        logger.warning(
            "NodePulse returned no %s nodes for %s; using default node",
            NodeType(node_type).value,
            network.value,
        )
        return DEFAULT_NODES[network]
    return nodes[0]


def explorer_url(network: Union[Network, str], transaction_id: Optional[str]) -> str:
    """Link to a transaction on the network's block explorer."""
    return f"{Network(network).explorer}/transaction/{transaction_id}"
