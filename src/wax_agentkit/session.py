"""
Signing session for a WAX account.

A :class:`WaxSession` bundles the chain endpoint, the acting account and its
key.  RPC transport, action encoding and signing are all done by ``eospy``;
this module only assembles the calls.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any, Union

from eospy.cleos import Cleos
from eospy.keys import EOSKey

from .errors import TransactionError, ValidationError, WaxAgentError

logger = logging.getLogger(__name__)

DEFAULT_PERMISSION = "active"
DEFAULT_EXPIRE_SECONDS = 30

ActionLike = Mapping[str, Any]


def load_key(private_key: str) -> EOSKey:
    """Load a WIF private key, raising :class:`ValidationError` if unusable."""
    if not private_key:
        raise ValidationError("Private key is required")
    try:
        return EOSKey(private_key)
    except Exception as exc:
        raise ValidationError("Invalid private key") from exc


class WaxSession:
    """Authenticated handle used to query the chain and push transactions."""

    def __init__(
        self,
        chain_id: str,
        url: str,
        actor: str,
        private_key: str,
        permission: str = DEFAULT_PERMISSION,
    ) -> None:
        self.chain_id = chain_id
        self.url = url
        self.actor = actor
        self.permission = permission
        self._key = load_key(private_key)
        self.client = Cleos(url=url)

    def authorization(self) -> list[dict[str, str]]:
        return [{"actor": self.actor, "permission": self.permission}]

    def _check_chain(self) -> None:
        # eospy signs with the chain id the node reports
        node_chain_id = (self.client.get_info() or {}).get("chain_id")
        if node_chain_id != self.chain_id:
            raise TransactionError(
                f"Node {self.url} is on chain {node_chain_id}, expected {self.chain_id}",
                details={"expected_chain_id": self.chain_id, "node_chain_id": node_chain_id},
            )

    def _encode(self, action: ActionLike) -> dict[str, Any]:
        encoded = dict(action)
        for field in ("account", "name"):
            if not encoded.get(field):
                raise ValidationError(f"Action is missing '{field}'")
        encoded.setdefault("authorization", self.authorization())
        data = encoded.get("data") or {}
        if not isinstance(data, str):
            binargs = self.client.abi_json_to_bin(encoded["account"], encoded["name"], data)
            data = binargs["binargs"]
        encoded["data"] = data
        return encoded

    def transact(
        self,
        actions: Union[ActionLike, Sequence[ActionLike]],
        expire_seconds: int = DEFAULT_EXPIRE_SECONDS,
    ) -> dict[str, Any]:
        """Sign and broadcast one or more actions as a single transaction."""
        if isinstance(actions, Mapping):
            actions = [actions]
        if not actions:
            raise ValidationError("At least one action is required")

        names = ", ".join(f"{a.get('account')}::{a.get('name')}" for a in actions)
        try:
            self._check_chain()
            payload = [self._encode(action) for action in actions]
            expiration = datetime.now(timezone.utc) + timedelta(seconds=expire_seconds)
            trx = {"actions": payload, "expiration": str(expiration)}
            logger.debug("Pushing transaction on %s as %s@%s: %s", self.url, self.actor, self.permission, names)
            result = self.client.push_transaction(trx, self._key, broadcast=True)
        except WaxAgentError:
            raise
        except Exception as exc:
            raise TransactionError(str(exc), details={"actions": names}) from exc

        logger.info("Transaction %s pushed (%s)", result.get("transaction_id"), names)
        return result

    def __repr__(self) -> str:
        return f"WaxSession(actor={self.actor!r}, url={self.url!r})"
