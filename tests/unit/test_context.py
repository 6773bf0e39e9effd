"""Unit tests for network context construction."""

import pytest

from evm_deployments.context import (
    config_keys,
    get_rpc_url,
    load_network_context,
    network_env_prefix,
)
from evm_deployments.types import ContractSpec, DeployedAddressRef, Literal, NetworkConfigRef


class TestNetworkEnvPrefix:
    """Test per-network environment prefixes."""

    def test_uppercases_network(self):
        """Test that the network name is uppercased."""
        assert network_env_prefix("sepolia") == "EVM_DEPLOY_SEPOLIA_"

    def test_replaces_separators(self):
        """Test that non-alphanumerics become underscores."""
        assert network_env_prefix("zksync-sepolia") == "EVM_DEPLOY_ZKSYNC_SEPOLIA_"


class TestConfigKeys:
    """Test config_keys()."""

    def test_collects_referenced_keys(self):
        """Test that only NetworkConfigRef keys are collected, sorted and unique."""
        specs = [
            ContractSpec("Arcade", arg_specs=[NetworkConfigRef("WETH_ADDRESS"), NetworkConfigRef("PROTOCOL_OWNER")]),
            ContractSpec("Vault", arg_specs=[DeployedAddressRef("Arcade"), Literal(1), NetworkConfigRef("PROTOCOL_OWNER")]),
        ]

        assert config_keys(specs) == ["PROTOCOL_OWNER", "WETH_ADDRESS"]


class TestLoadNetworkContext:
    """Test load_network_context()."""

    def test_known_network_gets_chain_id(self):
        """Test that chain_id comes from network configuration."""
        context = load_network_context("sepolia", env={})

        assert context.network_name == "sepolia"
        assert context.chain_id == 11155111

    def test_unknown_network_has_no_chain_id(self):
        """Test that unknown networks are allowed without chain_id."""
        assert load_network_context("devnet", env={}).chain_id is None

    def test_reads_requested_keys(self):
        """Test that only requested keys are read from the environment."""
        env = {"PROTOCOL_OWNER": "0xowner", "HOME": "/root"}

        context = load_network_context("sepolia", keys=["PROTOCOL_OWNER"], env=env)

        assert dict(context.config_values) == {"PROTOCOL_OWNER": "0xowner"}

    def test_missing_keys_are_left_out(self):
        """Test that absent variables are not given defaults."""
        context = load_network_context("sepolia", keys=["WETH_ADDRESS"], env={})

        assert "WETH_ADDRESS" not in context.config_values

    def test_network_prefixed_value_wins(self):
        """Test that EVM_DEPLOY_<NETWORK>_<KEY> overrides <KEY>."""
        env = {
            "PROTOCOL_OWNER": "0xbare",
            "EVM_DEPLOY_SEPOLIA_PROTOCOL_OWNER": "0xsepolia",
            "EVM_DEPLOY_MAINNET_PROTOCOL_OWNER": "0xmainnet",
        }

        context = load_network_context("sepolia", keys=["PROTOCOL_OWNER"], env=env)

        assert context.config_values["PROTOCOL_OWNER"] == "0xsepolia"

    def test_all_keys_when_unspecified(self):
        """Test that every variable is available when no keys are given."""
        env = {
            "WETH_ADDRESS": "0xweth",
            "EVM_DEPLOY_SEPOLIA_FEE": "25",
            "EVM_DEPLOY_MAINNET_FEE": "30",
        }

        context = load_network_context("sepolia", env=env)

        assert dict(context.config_values) == {"WETH_ADDRESS": "0xweth", "FEE": "25"}

    def test_overrides_win(self):
        """Test that explicit overrides beat the environment."""
        env = {"PROTOCOL_OWNER": "0xenv"}

        context = load_network_context(
            "sepolia", keys=["PROTOCOL_OWNER"], env=env, overrides={"PROTOCOL_OWNER": "0xcli"}
        )

        assert context.config_values["PROTOCOL_OWNER"] == "0xcli"

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Test that os.environ is used when env is not given."""
        monkeypatch.setenv("WETH_ADDRESS", "0xfromenv")

        context = load_network_context("sepolia", keys=["WETH_ADDRESS"])

        assert context.config_values["WETH_ADDRESS"] == "0xfromenv"

    def test_context_is_read_only(self):
        """Test that config values can't be modified after construction."""
        context = load_network_context("sepolia", keys=["A"], env={"A": "1"})

        with pytest.raises(TypeError):
            context.config_values["A"] = "2"


class TestGetRpcUrl:
    """Test get_rpc_url()."""

    def test_reads_network_rpc_variable(self):
        """Test that the network's RPC variable is used."""
        assert get_rpc_url("sepolia", env={"SEP_RPC_URL": "https://rpc.sepolia.example"}) == (
            "https://rpc.sepolia.example"
        )

    def test_missing_variable(self):
        """Test that an unset RPC variable raises ValueError naming it."""
        with pytest.raises(ValueError, match="SEP_RPC_URL"):
            get_rpc_url("sepolia", env={})

    def test_unknown_network(self):
        """Test that unknown networks require an explicit RPC URL."""
        with pytest.raises(ValueError, match="devnet"):
            get_rpc_url("devnet", env={})
