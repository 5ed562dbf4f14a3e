"""
Optional callback handler for logging WAX tool invocations.

Usage::

    from wax_agentkit.langchain import WaxCallbackHandler

    handler = WaxCallbackHandler()
    agent.invoke({"messages": [...]}, config={"callbacks": [handler]})
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from langchain_core.callbacks import BaseCallbackHandler

logger = logging.getLogger("wax_agentkit.langchain")

_TOOL_PREFIXES = ("wax_", "alcor_")


class WaxCallbackHandler(BaseCallbackHandler):
    """LangChain callback handler that records WAX tool invocations.

    Other tools are ignored, so the handler can sit alongside any other
    callbacks.

    Attributes:
        log_level: Python log level for tool invocations (default: INFO).
        records: In-memory list of structured event dicts.
    """

    def __init__(self, log_level: int = logging.INFO) -> None:
        super().__init__()
        self.log_level = log_level
        self.records: list[dict[str, Any]] = []

    def _start_record(self, run_id: UUID) -> Optional[dict[str, Any]]:
        matching = [r for r in self.records if r["run_id"] == str(run_id) and r["event"] == "tool_start"]
        return matching[-1] if matching else None

    def on_tool_start(
        self,
        serialized: dict[str, Any],
        input_str: str,
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        tags: Optional[list[str]] = None,
        metadata: Optional[dict[str, Any]] = None,
        inputs: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        tool_name = (serialized or {}).get("name", "")
        if not tool_name.startswith(_TOOL_PREFIXES):
            return

        self.records.append({
            "event": "tool_start",
            "tool": tool_name,
            "input": input_str,
            "run_id": str(run_id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })
        logger.log(self.log_level, "WAX tool invoked: %s | input: %s", tool_name, input_str)

    def on_tool_end(
        self,
        output: Any,
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        tags: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> None:
        start = self._start_record(run_id)
        if start is None:
            return

        # ToolMessage outputs carry the envelope in .content
        content = getattr(output, "content", output)
        try:
            parsed = json.loads(content)
        except (json.JSONDecodeError, TypeError):
            parsed = {"raw_output": content}
        if not isinstance(parsed, dict):
            parsed = {"raw_output": parsed}

        status = parsed.get("status")
        self.records.append({
            "event": "tool_end",
            "tool": start["tool"],
            "status": status,
            "output": parsed,
            "run_id": str(run_id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

        if status == "error":
            logger.warning(
                "WAX tool failed: %s | %s: %s",
                start["tool"],
                parsed.get("code", "UNKNOWN_ERROR"),
                parsed.get("message", "unknown"),
            )
        else:
            logger.log(self.log_level, "WAX tool completed: %s", start["tool"])

    def on_tool_error(
        self,
        error: BaseException,
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        tags: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> None:
        start = self._start_record(run_id)
        if start is None:
            return

        self.records.append({
            "event": "tool_error",
            "tool": start["tool"],
            "error": str(error),
            "run_id": str(run_id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })
        logger.error("WAX tool error: %s | %s", start["tool"], error)

    def get_transaction_records(self) -> list[dict[str, Any]]:
        """Return completed records whose output carries a transaction."""
        return [
            r for r in self.records
            if r["event"] == "tool_end" and "transaction" in r.get("output", {})
        ]

    def clear(self) -> None:
        self.records.clear()
