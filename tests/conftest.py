"""Shared pytest fixtures for evm-deployments tests."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from evm_deployments.artifacts import HardhatArtifactLoader
from evm_deployments.exceptions import ArtifactNotFoundError
from evm_deployments.types import Artifact, Confirmation, NetworkContext, PendingDeployment

OWNER = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"
WETH = "0x4200000000000000000000000000000000000006"


class FakeChainClient:
    """In-memory chain client recording every submitted deployment."""

    def __init__(
        self,
        addresses: Optional[Dict[str, str]] = None,
        fail_on: Optional[Dict[str, Exception]] = None,
    ):
        self.addresses = addresses or {}
        self.fail_on = fail_on or {}
        self.submitted: List[Tuple[str, List[Any]]] = []
        self.confirmed: List[str] = []

    def deploy(self, artifact: Artifact, args: Sequence[Any]) -> PendingDeployment:
        self.submitted.append((artifact.contract_name, list(args)))
        return PendingDeployment(
            contract_name=artifact.contract_name,
            transaction_hash=f"0x{len(self.submitted):064x}",
        )

    def await_confirmation(self, handle: PendingDeployment) -> Confirmation:
        if handle.contract_name in self.fail_on:
            raise self.fail_on[handle.contract_name]
        self.confirmed.append(handle.contract_name)
        address = self.addresses.get(
            handle.contract_name, f"0x{len(self.confirmed):040x}"
        )
        return Confirmation(
            address=address,
            transaction_hash=handle.transaction_hash,
            block=100 + len(self.confirmed),
        )


class StaticArtifactLoader:
    """Artifact loader serving artifacts built from constructor input types."""

    def __init__(self, constructor_types: Dict[str, List[str]]):
        self.constructor_types = constructor_types

    def load_artifact(self, name: str) -> Artifact:
        if name not in self.constructor_types:
            raise ArtifactNotFoundError(name)
        abi = [
            {
                "type": "constructor",
                "inputs": [
                    {"name": f"arg{i}", "type": t}
                    for i, t in enumerate(self.constructor_types[name])
                ],
            }
        ]
        return Artifact(contract_name=name, abi=abi, bytecode="0x6080")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample Hardhat artifacts directory."""
    return fixtures_dir / "artifacts"


@pytest.fixture
def arcade_plan(fixtures_dir: Path) -> Path:
    """Return path to the sample Arcade deployment plan."""
    return fixtures_dir / "plans" / "arcade.json"


@pytest.fixture
def artifact_loader(artifacts_dir: Path) -> HardhatArtifactLoader:
    """Create an artifact loader over the sample artifacts."""
    return HardhatArtifactLoader(artifacts_dir)


@pytest.fixture
def sepolia_context() -> NetworkContext:
    """Create a Sepolia context with owner and WETH configured."""
    return NetworkContext(
        network_name="sepolia",
        chain_id=11155111,
        config_values={"PROTOCOL_OWNER": OWNER, "WETH_ADDRESS": WETH},
    )


@pytest.fixture
def chain_client() -> FakeChainClient:
    """Create an in-memory chain client."""
    return FakeChainClient()


@pytest.fixture
def make_chain_client():
    """Return a factory for in-memory chain clients with fixed addresses or failures."""
    return FakeChainClient


@pytest.fixture
def make_loader():
    """Return a factory for artifact loaders keyed by constructor input types."""
    return StaticArtifactLoader
