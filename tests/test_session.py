"""Tests for wax_agentkit.session."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from wax_agentkit.errors import TransactionError, ValidationError
from wax_agentkit.session import WaxSession, load_key
from wax_agentkit.types import MAINNET_CHAIN_ID, TESTNET_CHAIN_ID


@pytest.fixture
def session(mock_client, private_key):
    return WaxSession(
        chain_id=TESTNET_CHAIN_ID,
        url="https://wax-testnet.example.com",
        actor="mywaxaccount",
        private_key=private_key,
    )


class TestLoadKey:
    def test_empty_key(self):
        with pytest.raises(ValidationError, match="Private key is required"):
            load_key("")

    def test_unparseable_key(self):
        with patch("wax_agentkit.session.EOSKey", side_effect=ValueError("bad checksum")):
            with pytest.raises(ValidationError, match="Invalid private key"):
                load_key("5Knotakey")

    def test_loads(self, mock_key, private_key):
        key = load_key(private_key)
        mock_key.assert_called_once_with(private_key)
        assert key is mock_key.return_value


class TestWaxSession:
    def test_authorization(self, session):
        assert session.authorization() == [{"actor": "mywaxaccount", "permission": "active"}]

    def test_transact_encodes_and_pushes(self, session, mock_client, mock_key):
        result = session.transact({
            "account": "eosio.token",
            "name": "transfer",
            "data": {"from": "mywaxaccount", "to": "bob", "quantity": "1.00000000 WAX", "memo": ""},
        })

        assert result["transaction_id"] == "f1e2d3c4b5a6"
        mock_client.abi_json_to_bin.assert_called_once_with(
            "eosio.token",
            "transfer",
            {"from": "mywaxaccount", "to": "bob", "quantity": "1.00000000 WAX", "memo": ""},
        )
        trx, key = mock_client.push_transaction.call_args.args
        assert key is mock_key.return_value
        assert mock_client.push_transaction.call_args.kwargs == {"broadcast": True}
        action = trx["actions"][0]
        assert action["data"] == "a09863fa2a8e9c49"
        assert action["authorization"] == [{"actor": "mywaxaccount", "permission": "active"}]

    def test_expiration_in_the_future(self, session, mock_client):
        session.transact({"account": "eosio", "name": "sellram", "data": {}}, expire_seconds=30)

        trx = mock_client.push_transaction.call_args.args[0]
        expiration = datetime.fromisoformat(trx["expiration"])
        assert expiration > datetime.now(timezone.utc)

    def test_pre_encoded_data_passes_through(self, session, mock_client):
        session.transact([{"account": "eosio", "name": "sellram", "data": "00ff"}])

        mock_client.abi_json_to_bin.assert_not_called()
        assert mock_client.push_transaction.call_args.args[0]["actions"][0]["data"] == "00ff"

    def test_multiple_actions_in_one_transaction(self, session, mock_client):
        session.transact([
            {"account": "eosio.token", "name": "create", "data": {"issuer": "mywaxaccount"}},
            {"account": "eosio.token", "name": "issue", "data": {"to": "mywaxaccount"}},
        ])

        assert mock_client.push_transaction.call_count == 1
        trx = mock_client.push_transaction.call_args.args[0]
        assert [a["name"] for a in trx["actions"]] == ["create", "issue"]

    def test_no_actions(self, session):
        with pytest.raises(ValidationError, match="At least one action is required"):
            session.transact([])

    def test_action_missing_name(self, session, mock_client):
        with pytest.raises(ValidationError, match="Action is missing 'name'"):
            session.transact({"account": "eosio.token"})
        mock_client.push_transaction.assert_not_called()

    def test_chain_failure_becomes_transaction_error(self, session, mock_client):
        mock_client.push_transaction.side_effect = RuntimeError("assertion failure with message: overdrawn balance")

        with pytest.raises(TransactionError) as exc_info:
            session.transact({"account": "eosio.token", "name": "transfer", "data": {}})

        assert "overdrawn balance" in exc_info.value.message
        assert exc_info.value.details == {"actions": "eosio.token::transfer"}

    def test_refuses_node_on_another_chain(self, mock_client, private_key):
        session = WaxSession(
            chain_id=MAINNET_CHAIN_ID,
            url="https://wax-testnet.example.com",
            actor="mywaxaccount",
            private_key=private_key,
        )

        with pytest.raises(TransactionError) as exc_info:
            session.transact({"account": "eosio.token", "name": "transfer", "data": {}})

        assert exc_info.value.details == {
            "expected_chain_id": MAINNET_CHAIN_ID,
            "node_chain_id": TESTNET_CHAIN_ID,
        }
        mock_client.push_transaction.assert_not_called()
        mock_client.abi_json_to_bin.assert_not_called()

    def test_checks_chain_before_signing(self, session, mock_client):
        session.transact({"account": "eosio", "name": "sellram", "data": {}})
        mock_client.get_info.assert_called_once_with()
