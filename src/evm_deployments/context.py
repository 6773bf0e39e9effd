"""Network context construction for evm-deployments library."""

import os
import re
from typing import Iterable, List, Mapping, Optional

from .constants import ENV_PREFIX, NETWORK_CONFIG
from .types import ContractSpec, NetworkConfigRef, NetworkContext


def network_env_prefix(network: str) -> str:
    """
    Get the environment variable prefix for per-network values.

    Args:
        network: Network name, e.g. "zkSyncSepoliaTestnet"

    Returns:
        Prefix such as "EVM_DEPLOY_ZKSYNCSEPOLIATESTNET_"
    """
    return f"{ENV_PREFIX}{re.sub(r'[^A-Za-z0-9]', '_', network).upper()}_"


def config_keys(specs: Iterable[ContractSpec]) -> List[str]:
    """Get every configuration key referenced by the specs, sorted."""
    return sorted(
        {
            arg.key
            for spec in specs
            for arg in spec.arg_specs
            if isinstance(arg, NetworkConfigRef)
        }
    )


def load_network_context(
    network: str,
    keys: Optional[Iterable[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> NetworkContext:
    """
    Build the network context of a run from environment variables.

    A per-network variable (EVM_DEPLOY_<NETWORK>_<KEY>) takes precedence over
    the bare variable (<KEY>). Keys found in neither are left out, so a
    missing value surfaces as ConfigMissingError when it is referenced.

    Args:
        network: Target network name
        keys: Configuration keys to read (defaults to all variables)
        env: Environment mapping (defaults to os.environ)
        overrides: Values that win over the environment

    Returns:
        NetworkContext with chain_id from NETWORK_CONFIG when the network is known
    """
    if env is None:
        env = os.environ

    prefix = network_env_prefix(network)
    if keys is None:
        keys = {name for name in env if not name.startswith(ENV_PREFIX)}
        keys |= {name[len(prefix):] for name in env if name.startswith(prefix)}

    values = {}
    for key in keys:
        if prefix + key in env:
            values[key] = env[prefix + key]
        elif key in env:
            values[key] = env[key]

    if overrides:
        values.update(overrides)

    network_config = NETWORK_CONFIG.get(network)
    chain_id = network_config["chain_id"] if network_config else None

    return NetworkContext(network_name=network, chain_id=chain_id, config_values=values)


def get_rpc_url(network: str, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Get the RPC URL of a network from its default environment variable.

    Raises:
        ValueError: If the network is unknown or its RPC variable is unset
    """
    if env is None:
        env = os.environ

    network_config = NETWORK_CONFIG.get(network)
    if network_config is None:
        raise ValueError(
            f"Unknown network '{network}': pass an RPC URL explicitly"
        )

    rpc_env = network_config["default_rpc_env"]
    rpc_url = env.get(rpc_env)
    if not rpc_url:
        raise ValueError(
            f"RPC URL required: set ${rpc_env} environment variable, "
            "or pass rpc_url parameter"
        )
    return rpc_url
