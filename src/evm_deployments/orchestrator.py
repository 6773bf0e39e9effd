"""Main API for evm-deployments library."""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from .artifacts import ArtifactLoader, HardhatArtifactLoader
from .chain import ChainClient, JsonRpcChainClient
from .context import config_keys, get_rpc_url, load_network_context
from .constants import NETWORK_CONFIG
from .exceptions import ChainClientError, RunStateError
from .executor import execute
from .paths import get_default_plan_path
from .planner import plan
from .plans import load_plan
from .report import args_files, emit
from .types import ContractSpec, DeploymentRecord, DeploymentReport, NetworkContext, RunState

logger = logging.getLogger(__name__)


class DeploymentRun:
    """One deployment of a set of contracts to a single network.

    State moves INITIALIZED -> PLANNED -> EXECUTING -> COMPLETED, or to
    FAILED on the first error. Both end states are terminal; a retry is a
    new run.
    """

    def __init__(
        self,
        specs: Iterable[ContractSpec],
        context: NetworkContext,
        artifact_loader: ArtifactLoader,
        chain_client: ChainClient,
    ):
        """
        Initialize the run.

        Args:
            specs: Contracts to deploy, in declaration order
            context: Target network and its configuration values
            artifact_loader: Source of compiled artifacts
            chain_client: Client that submits and confirms transactions
        """
        self.specs = list(specs)
        self.context = context
        self.artifact_loader = artifact_loader
        self.chain_client = chain_client
        self.state = RunState.INITIALIZED
        self.ordered_specs: List[ContractSpec] = []
        self._records: List[DeploymentRecord] = []

    @property
    def records(self) -> List[DeploymentRecord]:
        """Records of contracts deployed so far, in deployment order (a copy)."""
        return list(self._records)

    def plan(self) -> List[ContractSpec]:
        """
        Order the specs by dependency.

        Returns:
            Specs in deployment order

        Raises:
            RunStateError: If the run is not INITIALIZED
            DuplicateContractError, UnknownDependencyError, CyclicDependencyError:
                If the plan is malformed (run becomes FAILED)
        """
        self._require(RunState.INITIALIZED)
        try:
            self.ordered_specs = plan(self.specs)
        except Exception:
            self.state = RunState.FAILED
            raise
        self.state = RunState.PLANNED
        return self.ordered_specs

    def execute(self) -> List[DeploymentRecord]:
        """
        Deploy the planned specs.

        Returns:
            Deployment records

        Raises:
            RunStateError: If the run is not PLANNED
            DeploymentError: On the first failure (run becomes FAILED)
        """
        self._require(RunState.PLANNED)
        self.state = RunState.EXECUTING
        try:
            execute(
                self.ordered_specs,
                self.context,
                self.artifact_loader,
                self.chain_client,
                records=self._records,
            )
        except Exception:
            self.state = RunState.FAILED
            self._log_failure_summary()
            raise
        self.state = RunState.COMPLETED
        return self.records

    def run(self) -> DeploymentReport:
        """
        Plan and execute the run.

        Returns:
            DeploymentReport of the completed run

        Raises:
            RunStateError: If the run was already started
            DeploymentError: On the first planning or deployment failure
        """
        self.plan()
        self.execute()
        return self.report()

    def report(self) -> DeploymentReport:
        """Format the records deployed so far. Callable after a failure too."""
        address_lines, verify_commands = emit(self._records, self.context)
        return DeploymentReport(
            network=self.context.network_name,
            address_lines=address_lines,
            verify_commands=verify_commands,
            records=self.records,
            args_files=args_files(self._records),
        )

    def _require(self, state: RunState) -> None:
        if self.state is not state:
            raise RunStateError(
                f"Deployment run is {self.state.value}, expected {state.value}"
            )

    def _log_failure_summary(self) -> None:
        if not self._records:
            logger.warning(
                "Run on %s failed before any contract was deployed",
                self.context.network_name,
            )
            return

        logger.warning(
            "Run on %s failed after deploying %d contract(s): %s",
            self.context.network_name,
            len(self._records),
            ", ".join(record.contract_name for record in self._records),
        )


def build_run(
    network: str,
    plan_path: Optional[Union[Path, str]] = None,
    rpc_url: Optional[str] = None,
    artifacts_dir: Optional[Union[Path, str]] = None,
    from_address: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> DeploymentRun:
    """
    Set up a run that deploys the contracts of a plan file to a network.

    Args:
        network: Target network name (e.g. "sepolia")
        plan_path: Plan JSON file (defaults to ./deploy-plan.json)
        rpc_url: JSON-RPC endpoint (defaults to the network's RPC env var)
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)
        from_address: Deployer account (defaults to the node's first account)
        env: Environment mapping for config values (defaults to os.environ)
        overrides: Config values that win over the environment

    Returns:
        DeploymentRun in the INITIALIZED state

    Raises:
        ValueError: If no RPC URL can be determined
        FileNotFoundError: If the plan file doesn't exist
        PlanFileError: If the plan file is malformed
        ChainClientError: If the network is a zkSync Era network
    """
    if NETWORK_CONFIG.get(network, {}).get("zksync"):
        raise ChainClientError(
            f"{network} is a zkSync Era network; JsonRpcChainClient cannot send its "
            "EIP-712 deployment transactions. Use DeploymentRun with a zkSync-capable "
            "ChainClient instead"
        )
    if plan_path is None:
        plan_path = get_default_plan_path()
    if rpc_url is None:
        rpc_url = get_rpc_url(network, env)

    specs = load_plan(plan_path, network)
    context = load_network_context(
        network, keys=config_keys(specs), env=env, overrides=overrides
    )

    return DeploymentRun(
        specs,
        context,
        HardhatArtifactLoader(artifacts_dir),
        JsonRpcChainClient(rpc_url, from_address=from_address),
    )


def deploy_from_plan(network: str, **kwargs) -> DeploymentReport:
    """
    Deploy the contracts of a plan file to a network.

    Accepts the same keyword arguments as build_run().

    Returns:
        DeploymentReport of the completed run

    Raises:
        ValueError: If no RPC URL can be determined
        DeploymentError: On the first planning or deployment failure
    """
    return build_run(network, **kwargs).run()
