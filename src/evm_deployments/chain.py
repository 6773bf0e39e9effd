"""web3.py chain client for evm-deployments library."""

import logging
from typing import Any, Dict, Optional, Protocol, Sequence

import requests
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception

from .constants import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RPC_TIMEOUT,
    ZKSOLC_ARTIFACT_PREFIX,
)
from .exceptions import ChainClientError, ConfirmationTimeoutError, TransactionRevertedError
from .types import Artifact, Confirmation, PendingDeployment

logger = logging.getLogger(__name__)

# Anything the node or transport can throw; undecodable JSON raises ValueError
_NODE_ERRORS = (requests.RequestException, Web3Exception, ValueError)


class ChainClient(Protocol):
    """Submits deployment transactions and waits for them to land."""

    def deploy(self, artifact: Artifact, args: Sequence[Any]) -> PendingDeployment:
        ...

    def await_confirmation(self, handle: PendingDeployment) -> Confirmation:
        ...


def coerce_arg(param: Dict[str, Any], value: Any) -> Any:
    """
    Convert a configuration string to the value web3 expects for an ABI input.

    Configuration values arrive as strings. Integers accept decimal or 0x hex
    and booleans accept "true"/"false". Bytes are read from hex; addresses get
    checksummed. Arrays are converted element by element, anything else is
    passed through unchanged.
    """
    type_str = param["type"]
    if type_str.endswith("]") and isinstance(value, (list, tuple)):
        element = dict(param, type=type_str[: type_str.rindex("[")])
        return [coerce_arg(element, item) for item in value]
    if not isinstance(value, str):
        return value

    if type_str == "address":
        return Web3.to_checksum_address(value)
    if type_str.startswith(("uint", "int")):
        return int(value, 0)
    if type_str == "bool":
        lowered = value.strip().lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"Cannot interpret '{value}' as bool")
        return lowered == "true"
    if type_str.startswith("bytes"):
        return Web3.to_bytes(hexstr=value)
    return value


class JsonRpcChainClient:
    """Deploys contracts through a node's JSON-RPC endpoint with web3.py.

    Transactions are sent with eth_sendTransaction, so the node must manage
    the deployer account (a local Hardhat node, or a signing proxy). zkSync
    Era needs EIP-712 deployment transactions, which this client does not
    build; zksolc artifacts are rejected.
    """

    def __init__(
        self,
        rpc_url: str,
        from_address: Optional[str] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
    ):
        """
        Initialize the chain client.

        Args:
            rpc_url: JSON-RPC endpoint URL
            from_address: Deployer account (defaults to the node's first account)
            poll_interval: Seconds between receipt polls
            timeout: Seconds to wait for a receipt before giving up
        """
        self.rpc_url = rpc_url
        self.poll_interval = poll_interval
        self.timeout = timeout
        # Submitted transactions are never retried, so neither are requests
        self.w3 = Web3(
            Web3.HTTPProvider(
                rpc_url,
                request_kwargs={"timeout": DEFAULT_RPC_TIMEOUT},
                exception_retry_configuration=None,
            )
        )
        self._from_address = (
            Web3.to_checksum_address(from_address) if from_address is not None else None
        )

    @property
    def from_address(self) -> str:
        """Deployer account, queried from eth_accounts when not given."""
        if self._from_address is None:
            try:
                accounts = self.w3.eth.accounts
            except _NODE_ERRORS as e:
                raise ChainClientError(f"RPC call eth_accounts to {self.rpc_url} failed: {e}") from e
            if not accounts:
                raise ChainClientError(
                    f"Node at {self.rpc_url} manages no accounts; pass from_address"
                )
            self._from_address = accounts[0]
        return self._from_address

    def chain_id(self) -> int:
        """Get the chain ID reported by the node."""
        try:
            return self.w3.eth.chain_id
        except _NODE_ERRORS as e:
            raise ChainClientError(f"RPC call eth_chainId to {self.rpc_url} failed: {e}") from e

    def deploy(self, artifact: Artifact, args: Sequence[Any]) -> PendingDeployment:
        """
        Submit a contract creation transaction.

        Args:
            artifact: Compiled artifact to deploy
            args: Resolved constructor arguments

        Returns:
            Handle for the pending transaction

        Raises:
            ChainClientError: If the artifact targets zkSync or the node rejects the transaction
        """
        if (artifact.artifact_format or "").startswith(ZKSOLC_ARTIFACT_PREFIX):
            raise ChainClientError(
                f"{artifact.contract_name} was compiled with zksolc; zkSync Era "
                "deployments need an EIP-712 transaction this client cannot send"
            )

        values = [
            coerce_arg(param, value)
            for param, value in zip(artifact.constructor_inputs(), args)
        ]
        contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        sender = self.from_address
        try:
            tx_hash = contract.constructor(*values).transact({"from": sender})
        except _NODE_ERRORS as e:
            raise ChainClientError(
                f"Creation transaction for {artifact.contract_name} failed: {e}"
            ) from e

        transaction_hash = Web3.to_hex(tx_hash)
        logger.debug("Sent %s creation transaction %s", artifact.contract_name, transaction_hash)
        return PendingDeployment(
            contract_name=artifact.contract_name, transaction_hash=transaction_hash
        )

    def await_confirmation(self, handle: PendingDeployment) -> Confirmation:
        """
        Wait for the transaction receipt.

        Args:
            handle: Pending deployment returned by deploy()

        Returns:
            Confirmation with the created contract address

        Raises:
            TransactionRevertedError: If the transaction was mined but failed
            ConfirmationTimeoutError: If no receipt arrives within timeout
            ChainClientError: If the receipt carries no contract address
        """
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                handle.transaction_hash,
                timeout=self.timeout,
                poll_latency=self.poll_interval,
            )
        except TimeExhausted as e:
            raise ConfirmationTimeoutError(handle.transaction_hash, self.timeout) from e
        except _NODE_ERRORS as e:
            raise ChainClientError(
                f"Waiting for {handle.transaction_hash} failed: {e}"
            ) from e

        if receipt.get("status") == 0:
            raise TransactionRevertedError(handle.transaction_hash)

        address = receipt.get("contractAddress")
        if not address:
            raise ChainClientError(
                f"Receipt for {handle.transaction_hash} has no contract address"
            )

        return Confirmation(
            address=Web3.to_checksum_address(address),
            transaction_hash=handle.transaction_hash,
            block=receipt.get("blockNumber"),
        )
