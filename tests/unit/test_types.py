"""Unit tests for data types."""

import dataclasses

import pytest

from evm_deployments.types import (
    Artifact,
    ContractSpec,
    DeployedAddressRef,
    DeploymentRecord,
    Literal,
    NetworkConfigRef,
)


class TestArgSpecDisplay:
    """Test the declared display form of arguments."""

    def test_literal_display(self):
        """Test that literals display as their value."""
        assert Literal("0xabc").display() == "0xabc"
        assert Literal(250).display() == "250"
        assert Literal(True).display() == "true"

    def test_config_display(self):
        """Test that config references display as $KEY."""
        assert NetworkConfigRef("PROTOCOL_OWNER").display() == "$PROTOCOL_OWNER"

    def test_address_display(self):
        """Test that address references display as @Name."""
        assert DeployedAddressRef("Arcade").display() == "@Arcade"


class TestContractSpec:
    """Test ContractSpec."""

    def test_stores_immutable_collections(self):
        """Test that lists and sets are converted to tuple and frozenset."""
        spec = ContractSpec("A", arg_specs=[Literal(1)], depends_on={"B"})

        assert spec.arg_specs == (Literal(1),)
        assert spec.depends_on == frozenset({"B"})

    def test_dependencies_include_address_references(self):
        """Test that referenced contracts count as dependencies."""
        spec = ContractSpec(
            "Vault",
            arg_specs=[DeployedAddressRef("Arcade"), NetworkConfigRef("OWNER")],
            depends_on={"MulRewardPolicy"},
        )

        assert spec.dependencies() == frozenset({"Arcade", "MulRewardPolicy"})

    def test_frozen(self):
        """Test that specs cannot be modified."""
        spec = ContractSpec("A")

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.name = "B"


class TestDeploymentRecord:
    """Test DeploymentRecord."""

    def test_frozen(self):
        """Test that records are never mutated after creation."""
        record = DeploymentRecord(contract_name="A", address="0xA1", constructor_args=())

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.address = "0xB1"


class TestArtifact:
    """Test Artifact."""

    def test_constructor_inputs(self):
        """Test that constructor inputs come from the ABI."""
        artifact = Artifact(
            contract_name="Arcade",
            abi=[
                {"type": "function", "name": "play", "inputs": [{"type": "uint256"}]},
                {"type": "constructor", "inputs": [{"type": "address"}]},
            ],
            bytecode="0x6080",
        )

        assert artifact.constructor_inputs() == [{"type": "address"}]

    def test_no_constructor(self):
        """Test that a missing constructor means no inputs."""
        assert Artifact(contract_name="P", abi=[], bytecode="0x60").constructor_inputs() == []
