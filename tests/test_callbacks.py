"""Tests for wax_agentkit.langchain.callbacks."""

from __future__ import annotations

import json
import logging
from types import SimpleNamespace
from uuid import uuid4

from wax_agentkit.langchain import WaxCallbackHandler


class TestWaxCallbackHandler:
    def test_records_start_and_end(self):
        handler = WaxCallbackHandler()
        run_id = uuid4()

        handler.on_tool_start({"name": "wax_transfer"}, '{"to": "bob"}', run_id=run_id)
        handler.on_tool_end(
            json.dumps({"status": "success", "transaction": {"transaction_id": "abc"}}),
            run_id=run_id,
        )

        assert [r["event"] for r in handler.records] == ["tool_start", "tool_end"]
        end = handler.records[1]
        assert end["tool"] == "wax_transfer"
        assert end["status"] == "success"
        assert handler.get_transaction_records() == [end]

    def test_ignores_other_tools(self):
        handler = WaxCallbackHandler()
        run_id = uuid4()

        handler.on_tool_start({"name": "web_search"}, "query", run_id=run_id)
        handler.on_tool_end("result", run_id=run_id)
        handler.on_tool_error(RuntimeError("x"), run_id=run_id)

        assert handler.records == []

    def test_alcor_tool_tracked(self):
        handler = WaxCallbackHandler()
        handler.on_tool_start({"name": "alcor_swap_action"}, "{}", run_id=uuid4())
        assert handler.records[0]["tool"] == "alcor_swap_action"

    def test_error_envelope_logged_as_warning(self, caplog):
        handler = WaxCallbackHandler()
        run_id = uuid4()
        handler.on_tool_start({"name": "wax_sell_ram"}, "{}", run_id=run_id)

        with caplog.at_level(logging.WARNING, logger="wax_agentkit.langchain"):
            handler.on_tool_end(
                json.dumps({"status": "error", "message": "nope", "code": "VALIDATION_ERROR", "details": None}),
                run_id=run_id,
            )

        assert handler.records[-1]["status"] == "error"
        assert "VALIDATION_ERROR: nope" in caplog.text
        assert handler.get_transaction_records() == []

    def test_tool_message_output(self):
        handler = WaxCallbackHandler()
        run_id = uuid4()
        handler.on_tool_start({"name": "wax_balance"}, "", run_id=run_id)

        handler.on_tool_end(SimpleNamespace(content='{"status": "success", "balance": "1.00000000 WAX"}'), run_id=run_id)

        assert handler.records[-1]["output"]["balance"] == "1.00000000 WAX"

    def test_non_json_output(self):
        handler = WaxCallbackHandler()
        run_id = uuid4()
        handler.on_tool_start({"name": "wax_balance"}, "", run_id=run_id)
        handler.on_tool_end("plain text", run_id=run_id)
        assert handler.records[-1]["output"] == {"raw_output": "plain text"}
        assert handler.records[-1]["status"] is None

    def test_tool_error(self):
        handler = WaxCallbackHandler()
        run_id = uuid4()
        handler.on_tool_start({"name": "wax_balance"}, "", run_id=run_id)
        handler.on_tool_error(RuntimeError("crash"), run_id=run_id)

        assert handler.records[-1] == {
            "event": "tool_error",
            "tool": "wax_balance",
            "error": "crash",
            "run_id": str(run_id),
            "timestamp": handler.records[-1]["timestamp"],
        }

    def test_clear(self):
        handler = WaxCallbackHandler()
        handler.on_tool_start({"name": "wax_balance"}, "", run_id=uuid4())
        handler.clear()
        assert handler.records == []
