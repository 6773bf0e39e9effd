"""Compiled artifact loading for evm-deployments library."""

import json
import re
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from .exceptions import ArtifactNotFoundError, InvalidArtifactError
from .paths import resolve_artifacts_dir
from .types import Artifact

# Solidity library link placeholder, e.g. __$1f2e...$__
_LINK_PLACEHOLDER = re.compile(r"__\$[0-9a-fA-F]{34}\$__")


class ArtifactLoader(Protocol):
    """Resolves a contract name to its compiled artifact."""

    def load_artifact(self, name: str) -> Artifact:
        ...


def parse_hardhat_artifact(file_path: Path) -> Artifact:
    """
    Parse a Hardhat (or hardhat-zksync) artifact JSON file.

    Args:
        file_path: Path to artifacts/contracts/<Source>.sol/<Name>.json

    Returns:
        Artifact with contract name, ABI and creation bytecode

    Raises:
        InvalidArtifactError: If ABI or bytecode is missing, empty or unlinked
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidArtifactError(f"Artifact {file_path} is not valid JSON: {e}") from e

    abi = data.get("abi")
    if not isinstance(abi, list):
        raise InvalidArtifactError(f"ABI not found in artifact: {file_path}")

    bytecode = data.get("bytecode")
    if not isinstance(bytecode, str) or not bytecode.startswith("0x") or bytecode == "0x":
        # Interfaces and abstract contracts compile to empty bytecode
        raise InvalidArtifactError(
            f"Bytecode not found or empty in artifact: {file_path}"
        )

    placeholders = sorted(set(_LINK_PLACEHOLDER.findall(bytecode)))
    if placeholders:
        raise InvalidArtifactError(
            f"Artifact {file_path} has unlinked libraries: {', '.join(placeholders)}"
        )

    return Artifact(
        contract_name=data.get("contractName") or file_path.stem,
        abi=abi,
        bytecode=bytecode,
        artifact_format=data.get("_format"),
    )


class HardhatArtifactLoader:
    """Loads artifacts from a Hardhat artifacts directory."""

    def __init__(self, artifacts_dir: Optional[Union[Path, str]] = None):
        """
        Initialize the loader.

        Args:
            artifacts_dir: Hardhat artifacts directory
                           If None, uses ./artifacts
        """
        self.artifacts_dir = resolve_artifacts_dir(artifacts_dir)
        self._cache: Dict[str, Artifact] = {}

    def find_artifact_file(self, name: str) -> Path:
        """
        Locate the artifact file for a contract.

        Raises:
            ArtifactNotFoundError: If no file matches, or the name is ambiguous
        """
        candidates = sorted(
            path
            for path in self.artifacts_dir.rglob(f"{name}.json")
            if not path.name.endswith(".dbg.json") and "build-info" not in path.parts
        )
        if not candidates:
            raise ArtifactNotFoundError(
                name, f"No compiled artifact for '{name}' under {self.artifacts_dir}"
            )
        if len(candidates) > 1:
            found = ", ".join(str(p.relative_to(self.artifacts_dir)) for p in candidates)
            raise ArtifactNotFoundError(
                name, f"Artifact name '{name}' is ambiguous: {found}"
            )
        return candidates[0]

    def load_artifact(self, name: str) -> Artifact:
        """
        Load the compiled artifact of a contract.

        Args:
            name: Contract name, e.g. "Arcade"

        Returns:
            Artifact object

        Raises:
            ArtifactNotFoundError: If no artifact exists for the contract
            InvalidArtifactError: If the artifact is malformed
        """
        if name not in self._cache:
            self._cache[name] = parse_hardhat_artifact(self.find_artifact_file(name))
        return self._cache[name]
