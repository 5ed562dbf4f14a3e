"""Tests for wax_agentkit.contract.Contract."""

from __future__ import annotations

import pytest

from wax_agentkit.contract import Contract
from wax_agentkit.errors import ActionNotFoundError, ContractError, TableNotFoundError


@pytest.fixture
def contract(toolkit):
    return Contract.load(toolkit.get_session(), "eosio.token")


class TestLoad:
    def test_load(self, contract, mock_client):
        mock_client.get_abi.assert_called_once_with("eosio.token")
        assert contract.name == "eosio.token"
        assert contract.action_names == ["transfer", "issue"]
        assert contract.table_names == ["accounts", "stat"]

    def test_no_abi(self, toolkit, mock_client):
        mock_client.get_abi.return_value = {"account_name": "someaccount"}

        with pytest.raises(ContractError, match="Contract someaccount has no ABI"):
            Contract.load(toolkit.get_session(), "someaccount")

    def test_abi_without_tables(self, toolkit, mock_client):
        mock_client.get_abi.return_value = {"abi": {"actions": []}}
        contract = Contract.load(toolkit.get_session(), "empty")
        assert contract.tables == []
        assert contract.actions == []


class TestAction:
    def test_builds_action(self, contract):
        action = contract.action("transfer", {"to": "bob"})
        assert action == {
            "account": "eosio.token",
            "name": "transfer",
            "authorization": [{"actor": "mywaxaccount", "permission": "active"}],
            "data": {"to": "bob"},
        }

    def test_custom_authorization(self, contract):
        auth = [{"actor": "other", "permission": "owner"}]
        assert contract.action("issue", authorization=auth)["authorization"] == auth

    def test_unknown_action(self, contract):
        with pytest.raises(ActionNotFoundError) as exc_info:
            contract.action("burn")
        assert exc_info.value.message == 'Action "burn" not found in contract "eosio.token"'


class TestReadTable:
    def test_single_page(self, contract, mock_client):
        rows = contract.read_table("accounts", scope="mywaxaccount")

        assert rows == [{"balance": "120.50000000 WAX"}]
        mock_client.get_table.assert_called_once_with(
            "eosio.token", "mywaxaccount", "accounts", lower_bound="", limit=100
        )

    def test_scope_defaults_to_contract(self, contract, mock_client):
        contract.read_table("stat")
        assert mock_client.get_table.call_args.args[1] == "eosio.token"

    def test_follows_pagination(self, contract, mock_client):
        mock_client.get_table.side_effect = [
            {"rows": [{"id": 1}, {"id": 2}], "more": True, "next_key": "3"},
            {"rows": [{"id": 3}], "more": False, "next_key": ""},
        ]

        rows = contract.read_table("stat")

        assert [r["id"] for r in rows] == [1, 2, 3]
        assert mock_client.get_table.call_args_list[1].kwargs["lower_bound"] == "3"

    def test_repeated_next_key_stops(self, contract, mock_client):
        mock_client.get_table.return_value = {"rows": [{"id": 1}], "more": True, "next_key": "2"}

        with pytest.raises(ContractError, match="repeated next_key '2'"):
            contract.read_table("stat")

        assert mock_client.get_table.call_count == 2

    def test_limit(self, contract, mock_client):
        mock_client.get_table.return_value = {"rows": [{"id": 1}, {"id": 2}, {"id": 3}], "more": True, "next_key": "4"}

        rows = contract.read_table("stat", limit=2)

        assert rows == [{"id": 1}, {"id": 2}]
        assert mock_client.get_table.call_count == 1
        assert mock_client.get_table.call_args.kwargs["limit"] == 2

    def test_unknown_table(self, contract, mock_client):
        with pytest.raises(TableNotFoundError, match='Table "nope" not found in contract "eosio.token"'):
            contract.read_table("nope")
        mock_client.get_table.assert_not_called()
