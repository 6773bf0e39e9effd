"""Sequential execution of an ordered deployment plan."""

import logging
from typing import List, Optional, Sequence

from .artifacts import ArtifactLoader
from .chain import ChainClient
from .exceptions import ArgumentCountError, DeploymentFailedError
from .resolver import resolve_all
from .types import ContractSpec, DeploymentRecord, NetworkContext

logger = logging.getLogger(__name__)


def execute(
    ordered_specs: Sequence[ContractSpec],
    context: NetworkContext,
    artifact_loader: ArtifactLoader,
    chain_client: ChainClient,
    records: Optional[List[DeploymentRecord]] = None,
) -> List[DeploymentRecord]:
    """
    Deploy contracts one after another, in the given order.

    Processing halts on the first failure. Contracts confirmed before the
    failure stay on-chain, and their records stay in ``records``; nothing is
    rolled back and nothing is retried.

    Args:
        ordered_specs: Specs in deployment order (see planner.plan)
        context: Network the run targets
        artifact_loader: Source of compiled artifacts
        chain_client: Client that submits and confirms transactions
        records: Append-only list receiving one record per deployed contract
                 (a new list is created if None)

    Returns:
        The records list

    Raises:
        ArtifactNotFoundError: If a contract has no compiled artifact
        ConfigMissingError: If an argument can't be resolved; raised before
                            the contract's transaction is submitted
        ArgumentCountError: If declared arguments don't match the constructor
        DeploymentFailedError: If the chain client fails to deploy or confirm
    """
    if records is None:
        records = []

    for spec in ordered_specs:
        artifact = artifact_loader.load_artifact(spec.name)
        args = resolve_all(spec.arg_specs, context, records)

        expected = len(artifact.constructor_inputs())
        if expected != len(args):
            raise ArgumentCountError(spec.name, expected, len(args))

        logger.info("Deploying %s to %s", spec.name, context.network_name)
        try:
            handle = chain_client.deploy(artifact, args)
            confirmation = chain_client.await_confirmation(handle)
        except Exception as e:
            raise DeploymentFailedError(spec.name, e) from e

        records.append(
            DeploymentRecord(
                contract_name=spec.name,
                address=confirmation.address,
                constructor_args=tuple(args),
                arg_specs=spec.arg_specs,
                transaction_hash=confirmation.transaction_hash,
                block=confirmation.block,
            )
        )
        logger.info("%s deployed at %s", spec.name, confirmation.address)

    return records
