"""Deployment report formatting."""

import json
import shlex
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import NETWORK_CONFIG, VERIFY_COMMAND_PREFIX
from .types import DeploymentRecord, NetworkContext


def format_arg(value: Any) -> str:
    """Render a resolved constructor argument as a shell-safe CLI token."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, bytes):
        text = "0x" + value.hex()
    else:
        text = str(value)
    return shlex.quote(text)


def needs_args_file(record: DeploymentRecord) -> bool:
    """Check whether hardhat verify needs --constructor-args for a record.

    Array and struct arguments can't be passed as positional strings.
    """
    return any(isinstance(arg, (list, tuple, dict)) for arg in record.constructor_args)


def args_file_name(record: DeploymentRecord) -> str:
    return f"{record.contract_name}.args.js"


def _js_value(value: Any) -> Any:
    # Integers become strings so uint256 values keep their precision in JS
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, bytes):
        return "0x" + value.hex()
    if isinstance(value, (list, tuple)):
        return [_js_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _js_value(item) for key, item in value.items()}
    return value


def args_module(record: DeploymentRecord) -> str:
    """Render constructor arguments as the module --constructor-args loads."""
    values = [_js_value(arg) for arg in record.constructor_args]
    return f"module.exports = {json.dumps(values, indent=2)};\n"


def address_line(record: DeploymentRecord, context: NetworkContext) -> str:
    return f"{record.contract_name}: {context.network_name} {record.address}"


def verify_command(record: DeploymentRecord, context: NetworkContext) -> str:
    """
    Build the hardhat verify command for a deployed contract.

    Arguments are positional tokens, unless an array or struct argument
    makes the command point at args_file_name(record) instead.
    """
    parts = [
        VERIFY_COMMAND_PREFIX,
        "--network",
        shlex.quote(context.network_name),
    ]
    if needs_args_file(record):
        parts.extend(["--constructor-args", shlex.quote(args_file_name(record)), record.address])
    else:
        parts.append(record.address)
        parts.extend(format_arg(arg) for arg in record.constructor_args)
    return " ".join(parts)


def args_files(records: Sequence[DeploymentRecord]) -> Dict[str, str]:
    """
    Get the --constructor-args modules the verify commands refer to.

    Returns:
        File name to module source, for records with array or struct arguments
    """
    return {
        args_file_name(record): args_module(record)
        for record in records
        if needs_args_file(record)
    }


def explorer_url(record: DeploymentRecord, context: NetworkContext) -> Optional[str]:
    """
    Get the block explorer page of a deployed contract.

    Returns:
        URL string, or None if the network has no known explorer
    """
    network_config = NETWORK_CONFIG.get(context.network_name)
    if not network_config or not network_config["block_explorer_url"]:
        return None
    return f"{network_config['block_explorer_url']}/address/{record.address}"


def emit(
    records: Sequence[DeploymentRecord], context: NetworkContext
) -> Tuple[List[str], List[str]]:
    """
    Format deployment records for operators.

    Args:
        records: Deployment records in deployment order
        context: Network the records were deployed to

    Returns:
        Tuple of (address_lines, verify_commands), one entry per record
    """
    address_lines = [address_line(record, context) for record in records]
    verify_commands = [verify_command(record, context) for record in records]
    return address_lines, verify_commands
