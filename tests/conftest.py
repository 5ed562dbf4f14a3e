"""
Pytest configuration and fixtures for wax-agentkit tests.

The chain client (``eospy.cleos.Cleos``) and key loader are patched where
:mod:`wax_agentkit.session` looks them up, so no test touches the network.
"""
from __future__ import annotations

import copy
from unittest.mock import MagicMock, patch

import pytest

from wax_agentkit import WaxAgentToolkit
from wax_agentkit.config import get_settings
from wax_agentkit.types import TESTNET_CHAIN_ID

PRIVATE_KEY = "5KQwrPbwdL6PhXujxW37FSSQZ1JiwsST4cqQzDeyXtP79zkvFD3"
PUBLIC_KEY = "EOS6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV"
RPC_URL = "https://wax-testnet.example.com"

TOKEN_ABI = {
    "version": "eosio::abi/1.1",
    "actions": [
        {
            "name": "transfer",
            "type": "transfer",
            "ricardian_contract": (
                "Transfer {{quantity}} from {{from}} to {{to}}."
                "{{#if memo}} There is a memo attached: {{memo}}{{/if}}"
            ),
        },
        {
            "name": "issue",
            "type": "issue",
            "ricardian_contract": "Issue {{quantity}} to {{to}}.",
        },
    ],
    "tables": [
        {"name": "accounts", "index_type": "i64", "key_names": [], "key_types": [], "type": "account"},
        {"name": "stat", "index_type": "i64", "key_names": [], "key_types": [], "type": "currency_stats"},
    ],
}

ACCOUNT = {
    "account_name": "mywaxaccount",
    "created": "2024-03-01T12:30:00.000",
    "last_code_update": "1970-01-01T00:00:00.000",
    "privileged": False,
    "core_liquid_balance": "120.50000000 WAX",
    "ram_quota": 8192,
    "ram_usage": 3446,
    "cpu_limit": {"used": 271, "available": 9729, "max": 10000},
    "net_limit": {"used": 128, "available": 99872, "max": 100000},
    "permissions": [
        {
            "perm_name": "active",
            "parent": "owner",
            "required_auth": {"threshold": 1, "keys": [{"key": PUBLIC_KEY, "weight": 1}]},
        },
        {
            "perm_name": "owner",
            "parent": "",
            "required_auth": {"threshold": 1, "keys": [{"key": PUBLIC_KEY, "weight": 1}]},
        },
    ],
    "total_resources": {
        "owner": "mywaxaccount",
        "net_weight": "1.00000000 WAX",
        "cpu_weight": "2.00000000 WAX",
        "ram_bytes": 8192,
    },
}


@pytest.fixture
def private_key():
    return PRIVATE_KEY


@pytest.fixture
def public_key():
    return PUBLIC_KEY


@pytest.fixture
def token_abi():
    return copy.deepcopy(TOKEN_ABI)


@pytest.fixture
def account_info():
    return copy.deepcopy(ACCOUNT)


@pytest.fixture
def mock_key():
    """Patch the key loader so any non-empty key is accepted."""
    with patch("wax_agentkit.session.EOSKey") as key_cls:
        key_cls.return_value.to_public.return_value = PUBLIC_KEY
        yield key_cls


@pytest.fixture
def mock_client(mock_key, token_abi, account_info):
    """Patched chain client with happy-path responses."""
    client = MagicMock(name="Cleos")
    client.get_info.return_value = {"chain_id": TESTNET_CHAIN_ID, "head_block_num": 1000}
    client.get_currency_balance.return_value = ["120.50000000 WAX"]
    client.get_account.return_value = account_info
    client.get_abi.return_value = {"account_name": "eosio.token", "abi": token_abi}
    client.get_table.return_value = {"rows": [{"balance": "120.50000000 WAX"}], "more": False, "next_key": ""}
    client.abi_json_to_bin.return_value = {"binargs": "a09863fa2a8e9c49"}
    client.push_transaction.return_value = {"transaction_id": "f1e2d3c4b5a6", "processed": {}}

    with patch("wax_agentkit.session.Cleos", return_value=client):
        yield client


@pytest.fixture
def toolkit(mock_client, private_key):
    return WaxAgentToolkit(
        account_name="mywaxaccount",
        private_key=private_key,
        rpc_url=RPC_URL,
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove WAX configuration from the environment."""
    for name in (
        "WAX_ACCOUNT_NAME",
        "WAX_PRIVATE_KEY",
        "WAX_RPC_URL",
        "WAX_CHAIN_ID",
        "WAX_NETWORK",
        "WAX_NODE_TYPE",
        "WAX_OPENAI_API_KEY",
        "OPENAI_API_KEY",
        "WAX_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
