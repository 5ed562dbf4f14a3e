"""
Text formatting for account objects and contract actions.

Action parameters are read from the ricardian contract text attached to
each ABI action: every ``{{name}}`` placeholder is a parameter, and a
parameter used as the condition of a ``{{#if name}} ... {{/if}}`` block is
optional.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Optional, Union

REQUIRED = "required"
OPTIONAL = "optional"

# {{#if ...}}, {{/if}} and other handlebars helpers never match: the name
# must start with a letter or underscore.
_VARIABLE_RE = re.compile(r"{{\s*([a-zA-Z_][a-zA-Z0-9_]*)\s*}}")
_OPTIONAL_RE = re.compile(r"{{#if\s+([a-zA-Z_][a-zA-Z0-9_]*)}}[\s\S]*?{{/if}}")


def extract_params(ricardian_text: Optional[str]) -> dict[str, str]:
    """Classify the placeholders of a ricardian text as required or optional."""
    params: dict[str, str] = {}
    if not ricardian_text:
        return params
    for match in _VARIABLE_RE.finditer(ricardian_text):
        params.setdefault(match.group(1), REQUIRED)
    for match in _OPTIONAL_RE.finditer(ricardian_text):
        params[match.group(1)] = OPTIONAL
    return params


def format_contract_action(action: Mapping[str, Any]) -> str:
    name = action.get("name", "")
    params = extract_params(action.get("ricardian_contract"))
    return (
        f"-------------------------------ActionName: {name}----------------------------------\n"
        f"Type: {action.get('type', '')}\n"
        f"Params: {json.dumps(params, separators=(',', ':'))}\n"
    )


def format_contract_actions(
    actions: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]],
) -> Union[str, list[str]]:
    """Format one action, or each action of a list."""
    if isinstance(actions, Mapping):
        return format_contract_action(actions)
    return [format_contract_action(a) for a in actions]


def _timestamp(value: Optional[str]) -> str:
    if not value:
        return "N/A"
    try:
        return datetime.fromisoformat(value.rstrip("Z")).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return value


def _usage(limit: Optional[Mapping[str, Any]]) -> str:
    if not limit:
        return "N/A"
    return f"{limit.get('used', 'N/A')} / {limit.get('max', 'N/A')}"


def _permission(index: int, permission: Mapping[str, Any]) -> str:
    auth = permission.get("required_auth") or {}
    keys = ", ".join(k.get("key", "") for k in auth.get("keys", [])) or "None"
    linked = permission.get("linked_actions") or []
    linked_text = ", ".join(
        f"{la.get('account')}::{la.get('action') or '*'}" if isinstance(la, Mapping) else str(la)
        for la in linked
    ) or "None"
    return (
        f"Permission {index}:\n"
        f"- Name: {permission.get('perm_name', 'N/A')}\n"
        f"- Parent: {permission.get('parent') or 'N/A'}\n"
        f"- Required Authentication: {keys}\n"
        f"- Linked Actions: {linked_text}\n"
    )


def format_account_info(account: Mapping[str, Any]) -> str:
    """Render a ``get_account`` response as a readable report."""
    totals = account.get("total_resources") or {}
    sections = [
        "Account Information:\n"
        f"- Account Name: {account.get('account_name', 'N/A')}\n"
        f"- Account Created On: {_timestamp(account.get('created'))}\n"
        f"- Last Code Update: {_timestamp(account.get('last_code_update'))}\n"
        f"- Privileged Status: {'Yes' if account.get('privileged') else 'No'}\n",
        "Resource Usage & Limits:\n"
        f"- CPU Usage: {_usage(account.get('cpu_limit'))}\n"
        f"- Network Usage: {_usage(account.get('net_limit'))}\n"
        f"- RAM Usage: {account.get('ram_usage', 'N/A')} bytes / {account.get('ram_quota', 'N/A')} bytes\n",
        "Core Liquid Balance:\n"
        f"- {account.get('core_liquid_balance') or 'N/A'}\n",
        *(_permission(i, p) for i, p in enumerate(account.get("permissions") or [], start=1)),
        "Resource Totals:\n"
        f"- Total Net Weight: {totals.get('net_weight', 'N/A')}\n"
        f"- Total CPU Weight: {totals.get('cpu_weight', 'N/A')}\n"
        f"- Total RAM Bytes: {totals.get('ram_bytes', 'N/A')} bytes\n",
    ]
    return "\n".join(sections)
