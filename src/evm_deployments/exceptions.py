"""Custom exception classes for evm-deployments library."""

from typing import Iterable


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigMissingError(DeploymentError, LookupError):
    """Raised when a required configuration value or deployed address is absent."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or f"Required configuration value '{key}' is missing")


class CyclicDependencyError(DeploymentError, ValueError):
    """Raised when the deployment plan contains a dependency cycle."""

    def __init__(self, names: Iterable[str]):
        self.names = tuple(sorted(names))
        super().__init__(
            f"Cyclic dependency between contracts: {', '.join(self.names)}"
        )


class UnknownDependencyError(DeploymentError, ValueError):
    """Raised when a contract depends on a name absent from the plan."""

    def __init__(self, name: str, dependency: str):
        self.name = name
        self.dependency = dependency
        super().__init__(
            f"Contract '{name}' depends on '{dependency}', which is not in the plan"
        )


class DuplicateContractError(DeploymentError, ValueError):
    """Raised when two contracts in a plan share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Contract '{name}' is declared more than once")


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no compiled artifact exists for a contract."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        super().__init__(message or f"No compiled artifact found for contract '{name}'")


class InvalidArtifactError(DeploymentError, ValueError):
    """Raised when an artifact file lacks a usable ABI or bytecode."""

    pass


class ArgumentCountError(DeploymentError, ValueError):
    """Raised when declared constructor arguments don't match the constructor ABI."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Contract '{name}' constructor takes {expected} argument(s), "
            f"but {actual} were declared"
        )


class DeploymentFailedError(DeploymentError, RuntimeError):
    """Raised when the chain client fails to submit or confirm a deployment."""

    def __init__(self, spec_name: str, cause: BaseException):
        self.spec_name = spec_name
        self.cause = cause
        super().__init__(f"Deployment of '{spec_name}' failed: {cause}")


class ChainClientError(DeploymentError, RuntimeError):
    """Raised on JSON-RPC transport or node errors."""

    pass


class TransactionRevertedError(ChainClientError):
    """Raised when a deployment transaction is mined with a failed status."""

    def __init__(self, transaction_hash: str):
        self.transaction_hash = transaction_hash
        super().__init__(f"Transaction {transaction_hash} reverted")


class ConfirmationTimeoutError(ChainClientError, TimeoutError):
    """Raised when no receipt arrives before the confirmation timeout."""

    def __init__(self, transaction_hash: str, timeout: float):
        self.transaction_hash = transaction_hash
        super().__init__(
            f"Transaction {transaction_hash} not confirmed after {timeout:g}s"
        )


class PlanFileError(DeploymentError, ValueError):
    """Raised when a deployment plan file is malformed."""

    pass


class RunStateError(DeploymentError, RuntimeError):
    """Raised when a deployment run is used outside its allowed state."""

    pass
