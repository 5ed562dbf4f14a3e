"""Generic contract introspection, table reads and action execution."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from ..contract import Contract
from ..errors import ValidationError, wrap_error

if TYPE_CHECKING:
    from ..agent import WaxAgentToolkit

logger = logging.getLogger(__name__)


def _require(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} must be a non-empty string")
    return value.strip()


def load_contract(toolkit: "WaxAgentToolkit", contract_name: str) -> Contract:
    return Contract.load(toolkit.get_session(), contract_name)


def contract_list_actions(toolkit: "WaxAgentToolkit", contract_name: str) -> list[dict[str, Any]]:
    """ABI actions of ``contract_name`` (name, type, ricardian text)."""
    try:
        name = _require(contract_name, "Contract name")
        return load_contract(toolkit, name).actions
    except Exception as exc:
        raise wrap_error(f"Error fetching contract actions for {contract_name}", exc) from exc


def contract_list_tables(toolkit: "WaxAgentToolkit", contract_name: str) -> list[dict[str, Any]]:
    """ABI table definitions of ``contract_name``; empty if it has none."""
    name = _require(contract_name, "Contract name")
    try:
        return load_contract(toolkit, name).tables
    except Exception as exc:
        raise wrap_error(f"Failed to fetch contract tables for {name}", exc) from exc


def contract_read_table(
    toolkit: "WaxAgentToolkit",
    contract_name: str,
    table_name: str,
    *,
    scope: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[dict[str, Any]]:
    """All rows of ``table_name`` in ``contract_name`` (scope defaults to the contract)."""
    name = _require(contract_name, "Contract name")
    table = _require(table_name, "Table name")
    try:
        return load_contract(toolkit, name).read_table(table, scope=scope, limit=limit)
    except Exception as exc:
        raise wrap_error(f'Failed to read table "{table}" from contract "{name}"', exc) from exc


def contract_execute_action(
    toolkit: "WaxAgentToolkit",
    contract_name: str,
    action_name: str,
    data: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Sign and push ``contract_name::action_name`` as ``<agent>@active``."""
    contract_name = _require(contract_name, "Contract name")
    action_name = _require(action_name, "Action name")
    try:
        session = toolkit.get_session()
        contract = Contract.load(session, contract_name)
        action = contract.action(action_name, data or {}, session.authorization())
        logger.info("Executing %s::%s as %s", contract_name, action_name, toolkit.account_name)
        return session.transact(action)
    except Exception as exc:
        raise wrap_error(
            f'Failed to execute action "{action_name}" on contract "{contract_name}"', exc
        ) from exc
