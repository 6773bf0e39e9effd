"""Constructor argument resolution for evm-deployments library."""

from typing import Any, List, Sequence

from .exceptions import ConfigMissingError
from .types import (
    ArgSpec,
    DeployedAddressRef,
    DeploymentRecord,
    Literal,
    NetworkConfigRef,
    NetworkContext,
)


def resolve(
    arg_spec: ArgSpec,
    context: NetworkContext,
    records_so_far: Sequence[DeploymentRecord],
) -> Any:
    """
    Resolve one declared constructor argument to a concrete value.

    Args:
        arg_spec: Declared argument
        context: Network the run targets
        records_so_far: Contracts already deployed in this run

    Returns:
        The concrete argument value

    Raises:
        ConfigMissingError: If the config key is absent, or the referenced
                            contract has not been deployed yet
    """
    match arg_spec:
        case Literal(value=value):
            return value
        case NetworkConfigRef(key=key):
            if key not in context.config_values:
                raise ConfigMissingError(
                    key,
                    f"Configuration value '{key}' is not set for network "
                    f"'{context.network_name}'",
                )
            return context.config_values[key]
        case DeployedAddressRef(contract_name=name):
            for record in records_so_far:
                if record.contract_name == name:
                    return record.address
            raise ConfigMissingError(
                name, f"Contract '{name}' has not been deployed in this run"
            )
        case _:
            raise TypeError(f"Unsupported argument spec: {arg_spec!r}")


def resolve_all(
    arg_specs: Sequence[ArgSpec],
    context: NetworkContext,
    records_so_far: Sequence[DeploymentRecord],
) -> List[Any]:
    """Resolve declared arguments in declaration order."""
    return [resolve(arg, context, records_so_far) for arg in arg_specs]
