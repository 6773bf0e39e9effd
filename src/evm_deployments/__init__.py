"""
evm-deployments: Python library for dependency-ordered smart contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .artifacts import HardhatArtifactLoader
from .chain import JsonRpcChainClient
from .context import load_network_context
from .exceptions import (
    ArgumentCountError,
    ArtifactNotFoundError,
    ChainClientError,
    ConfigMissingError,
    ConfirmationTimeoutError,
    CyclicDependencyError,
    DeploymentError,
    DeploymentFailedError,
    DuplicateContractError,
    InvalidArtifactError,
    PlanFileError,
    RunStateError,
    TransactionRevertedError,
    UnknownDependencyError,
)
from .executor import execute
from .orchestrator import DeploymentRun, build_run, deploy_from_plan
from .planner import plan
from .plans import load_plan
from .report import emit
from .resolver import resolve
from .types import (
    Artifact,
    ContractSpec,
    DeployedAddressRef,
    DeploymentRecord,
    DeploymentReport,
    Literal,
    NetworkConfigRef,
    NetworkContext,
    RunState,
)

try:
    __version__ = version("evm-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentRun",
    "build_run",
    "deploy_from_plan",
    "plan",
    "execute",
    "emit",
    "resolve",
    "load_plan",
    "load_network_context",
    "HardhatArtifactLoader",
    "JsonRpcChainClient",
    "Artifact",
    "ContractSpec",
    "DeployedAddressRef",
    "DeploymentRecord",
    "DeploymentReport",
    "Literal",
    "NetworkConfigRef",
    "NetworkContext",
    "RunState",
    "DeploymentError",
    "ConfigMissingError",
    "CyclicDependencyError",
    "UnknownDependencyError",
    "DuplicateContractError",
    "ArtifactNotFoundError",
    "InvalidArtifactError",
    "ArgumentCountError",
    "DeploymentFailedError",
    "ChainClientError",
    "TransactionRevertedError",
    "ConfirmationTimeoutError",
    "PlanFileError",
    "RunStateError",
]
