"""Path management utilities for evm-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_artifacts_dir() -> Path:
    """
    Get default Hardhat artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def get_default_plan_path() -> Path:
    """Get default deployment plan path (./deploy-plan.json)."""
    return Path.cwd() / "deploy-plan.json"


def resolve_artifacts_dir(artifacts_dir: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve an artifacts directory argument.

    Args:
        artifacts_dir: Custom artifacts directory (defaults to get_default_artifacts_dir())

    Returns:
        Absolute path to the artifacts directory
    """
    if artifacts_dir is None:
        return get_default_artifacts_dir()
    return Path(artifacts_dir).absolute()
