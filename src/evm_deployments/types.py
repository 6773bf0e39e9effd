"""Data types and dataclasses for evm-deployments library."""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Literal:
    """Constructor argument passed through unchanged."""

    value: Any

    def display(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return json.dumps(self.value)


@dataclass(frozen=True)
class NetworkConfigRef:
    """Constructor argument read from the network's configuration values."""

    key: str

    def display(self) -> str:
        return f"${self.key}"


@dataclass(frozen=True)
class DeployedAddressRef:
    """Constructor argument taken from a contract deployed earlier in the run."""

    contract_name: str

    def display(self) -> str:
        return f"@{self.contract_name}"


ArgSpec = Union[Literal, NetworkConfigRef, DeployedAddressRef]


@dataclass(frozen=True)
class ContractSpec:
    """A contract to deploy, with its declared constructor arguments."""

    name: str
    arg_specs: Tuple[ArgSpec, ...] = ()
    depends_on: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        # Accept lists/sets from callers; store immutable copies
        object.__setattr__(self, "arg_specs", tuple(self.arg_specs))
        object.__setattr__(self, "depends_on", frozenset(self.depends_on))

    def dependencies(self) -> FrozenSet[str]:
        """Explicit dependencies plus every contract referenced by address."""
        referenced = {
            arg.contract_name
            for arg in self.arg_specs
            if isinstance(arg, DeployedAddressRef)
        }
        return self.depends_on | referenced


@dataclass(frozen=True)
class NetworkContext:
    """The target network of a run and its configuration values."""

    network_name: str
    chain_id: Optional[int] = None
    config_values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "config_values", MappingProxyType(dict(self.config_values))
        )


@dataclass(frozen=True)
class Artifact:
    """Compiled contract artifact."""

    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str  # 0x-prefixed creation bytecode
    artifact_format: Optional[str] = None  # Hardhat "_format", e.g. hh-zksolc-artifact-1

    def constructor_inputs(self) -> List[Dict[str, Any]]:
        for item in self.abi:
            if item.get("type") == "constructor":
                return list(item.get("inputs", []))
        return []


@dataclass(frozen=True)
class PendingDeployment:
    """Handle for a submitted, not yet confirmed, deployment transaction."""

    contract_name: str
    transaction_hash: str


@dataclass(frozen=True)
class Confirmation:
    """Result of a confirmed deployment transaction."""

    address: str
    transaction_hash: Optional[str] = None
    block: Optional[int] = None


@dataclass(frozen=True)
class DeploymentRecord:
    """A contract successfully deployed during a run."""

    # Required fields
    contract_name: str
    address: str
    constructor_args: Tuple[Any, ...]  # Resolved, in submission order

    # Optional fields
    arg_specs: Tuple[ArgSpec, ...] = ()  # Declared (pre-resolution) form
    transaction_hash: Optional[str] = None
    block: Optional[int] = None


class RunState(Enum):
    """Lifecycle of a deployment run."""

    INITIALIZED = "initialized"
    PLANNED = "planned"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class DeploymentReport:
    """Human-readable outcome of a run."""

    network: str
    address_lines: List[str]
    verify_commands: List[str]
    records: List[DeploymentRecord]
    # File name to source of the --constructor-args modules verify commands use
    args_files: Dict[str, str] = field(default_factory=dict)
