"""Deployment plan file parsing for evm-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import PlanFileError
from .types import ArgSpec, ContractSpec, DeployedAddressRef, Literal, NetworkConfigRef

# Key of the fallback argument list in a per-network "args" mapping
DEFAULT_ARGS_KEY = "default"


def parse_arg_spec(raw: Any) -> ArgSpec:
    """
    Parse one declared constructor argument.

    Accepted forms:
    - {"literal": value}
    - {"config": "KEY"}
    - {"address": "ContractName"}
    - bare JSON scalar or list (literal)

    Raises:
        PlanFileError: If an object doesn't have exactly one known tag
    """
    if not isinstance(raw, dict):
        return Literal(raw)

    if len(raw) != 1:
        raise PlanFileError(f"Argument must have exactly one tag, got: {raw!r}")

    tag, value = next(iter(raw.items()))
    match tag:
        case "literal":
            return Literal(value)
        case "config":
            if not isinstance(value, str):
                raise PlanFileError(f"Config key must be a string, got: {value!r}")
            return NetworkConfigRef(value)
        case "address":
            if not isinstance(value, str):
                raise PlanFileError(f"Contract name must be a string, got: {value!r}")
            return DeployedAddressRef(value)
        case _:
            raise PlanFileError(
                f"Unknown argument tag '{tag}' (expected literal, config or address)"
            )


def select_network_args(name: str, args: Any, network: str) -> List[Any]:
    """
    Pick the argument list of a contract for a network.

    A list applies to every network. A mapping must name the network, or
    provide a "default" list; the argument count is never guessed.

    Raises:
        PlanFileError: If no argument list applies to the network
    """
    if args is None:
        return []
    if isinstance(args, list):
        return args
    if not isinstance(args, dict):
        raise PlanFileError(f"Contract '{name}': args must be a list or a mapping")

    if network in args:
        selected = args[network]
    elif DEFAULT_ARGS_KEY in args:
        selected = args[DEFAULT_ARGS_KEY]
    else:
        raise PlanFileError(
            f"Contract '{name}' declares no constructor arguments for network "
            f"'{network}' and no '{DEFAULT_ARGS_KEY}'"
        )

    if not isinstance(selected, list):
        raise PlanFileError(
            f"Contract '{name}': args for '{network}' must be a list"
        )
    return selected


def parse_contract_spec(raw: Dict[str, Any], network: str) -> ContractSpec:
    """Parse one contract entry of a plan for the given network."""
    if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
        raise PlanFileError(f"Contract entry must be an object with a name: {raw!r}")

    name = raw["name"]
    depends_on = raw.get("depends_on", [])
    if not isinstance(depends_on, list) or not all(isinstance(d, str) for d in depends_on):
        raise PlanFileError(f"Contract '{name}': depends_on must be a list of names")

    arg_specs = [
        parse_arg_spec(arg) for arg in select_network_args(name, raw.get("args"), network)
    ]
    return ContractSpec(name=name, arg_specs=tuple(arg_specs), depends_on=frozenset(depends_on))


def parse_plan(data: Dict[str, Any], network: str) -> List[ContractSpec]:
    """
    Parse a deployment plan document for a network.

    Args:
        data: Plan document, {"contracts": [...]}
        network: Target network name

    Returns:
        Contract specs in declaration order

    Raises:
        PlanFileError: If the document is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("contracts"), list):
        raise PlanFileError("Plan must be an object with a 'contracts' list")
    return [parse_contract_spec(entry, network) for entry in data["contracts"]]


def load_plan(plan_path: Union[Path, str], network: str) -> List[ContractSpec]:
    """
    Load a deployment plan file for a network.

    Args:
        plan_path: Path to the plan JSON file
        network: Target network name

    Returns:
        Contract specs in declaration order

    Raises:
        FileNotFoundError: If the plan file doesn't exist
        PlanFileError: If the file is not valid JSON or is malformed
    """
    with open(plan_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise PlanFileError(f"Plan {plan_path} is not valid JSON: {e}") from e
    return parse_plan(data, network)
