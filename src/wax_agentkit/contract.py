"""Contract handle built from an on-chain ABI."""
from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import ActionNotFoundError, ContractError, TableNotFoundError
from .session import WaxSession

logger = logging.getLogger(__name__)

TABLE_PAGE_SIZE = 100


class Contract:
    """A deployed contract: its ABI plus the session used to reach it."""

    def __init__(self, session: WaxSession, name: str, abi: dict[str, Any]) -> None:
        self.session = session
        self.name = name
        self.abi = abi

    @classmethod
    def load(cls, session: WaxSession, name: str) -> "Contract":
        response = session.client.get_abi(name)
        abi = (response or {}).get("abi")
        if not abi:
            raise ContractError(f"Contract {name} has no ABI", details={"contract": name})
        return cls(session, name, abi)

    @property
    def actions(self) -> list[dict[str, Any]]:
        return list(self.abi.get("actions") or [])

    @property
    def tables(self) -> list[dict[str, Any]]:
        return list(self.abi.get("tables") or [])

    @property
    def action_names(self) -> list[str]:
        return [a["name"] for a in self.actions]

    @property
    def table_names(self) -> list[str]:
        return [t["name"] for t in self.tables]

    def has_action(self, name: str) -> bool:
        return name in self.action_names

    def has_table(self, name: str) -> bool:
        return name in self.table_names

    def action(
        self,
        name: str,
        data: Optional[dict[str, Any]] = None,
        authorization: Optional[list[dict[str, str]]] = None,
    ) -> dict[str, Any]:
        """Build an action for this contract, ready for ``session.transact``."""
        if not self.has_action(name):
            raise ActionNotFoundError(
                f'Action "{name}" not found in contract "{self.name}"',
                details={"contract": self.name, "action": name},
            )
        return {
            "account": self.name,
            "name": name,
            "authorization": authorization or self.session.authorization(),
            "data": data or {},
        }

    def read_table(
        self,
        table: str,
        scope: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Return every row of ``table`` (or the first ``limit`` rows)."""
        if not self.has_table(table):
            raise TableNotFoundError(
                f'Table "{table}" not found in contract "{self.name}"',
                details={"contract": self.name, "table": table},
            )

        rows: list[dict[str, Any]] = []
        lower_bound = ""
        while True:
            page_size = TABLE_PAGE_SIZE if limit is None else min(TABLE_PAGE_SIZE, limit - len(rows))
            page = self.session.client.get_table(
                self.name,
                scope or self.name,
                table,
                lower_bound=lower_bound,
                limit=page_size,
            )
            rows.extend(page.get("rows", []))
            if limit is not None and len(rows) >= limit:
                return rows[:limit]
            next_key = page.get("next_key")
            if not page.get("more") or not next_key:
                return rows
            if next_key == lower_bound:
                raise ContractError(
                    f'Table "{table}" of contract "{self.name}" repeated next_key {next_key!r}',
                    details={"contract": self.name, "table": table, "next_key": next_key},
                )
            logger.debug("Reading %s/%s from %s", self.name, table, next_key)
            lower_bound = next_key
