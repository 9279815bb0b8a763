"""
Artifact loader for compiled smart contracts.

This module resolves contract names to the Hardhat-compiled artifact JSON
files and exposes their ABI, bytecode and compilation metadata.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union

PACKAGE_DIR = Path(__file__).parent.parent
# Artifacts shipped as package data
PACKAGED_ARTIFACTS_DIR = PACKAGE_DIR / "data" / "artifacts"

ARTIFACTS_DIR_ENV = "SPLITS_DEPLOY_ARTIFACTS_DIR"

# Contract name mappings
CONTRACT_PATHS = {
    "Token": "Token.sol/Token.json",
    "SplitsWarehouseMock": "SplitsWarehouseMock.sol/SplitsWarehouseMock.json",
}


def resolve_artifacts_dir(artifacts_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Work out which directory holds the compiled artifacts.

    An explicit argument wins, then the SPLITS_DEPLOY_ARTIFACTS_DIR
    environment variable, then packaged artifacts, and finally the
    ``artifacts/contracts`` folder of the Hardhat project in the current
    working directory.
    """
    if artifacts_dir:
        return Path(artifacts_dir)

    from_env = os.environ.get(ARTIFACTS_DIR_ENV)
    if from_env:
        return Path(from_env)

    if PACKAGED_ARTIFACTS_DIR.exists():
        return PACKAGED_ARTIFACTS_DIR

    return Path.cwd() / "artifacts" / "contracts"


def load_artifact(
    contract_name: str,
    artifacts_dir: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'Token', 'SplitsWarehouseMock')
        artifacts_dir: Directory to read from instead of the resolved default

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    artifact_path = resolve_artifacts_dir(artifacts_dir) / CONTRACT_PATHS[contract_name]

    if not artifact_path.exists():
        raise FileNotFoundError(
            f"Artifact file not found: {artifact_path}\n"
            f"Make sure the contracts have been compiled with 'npx hardhat compile'"
        )

    with open(artifact_path, 'r') as f:
        return json.load(f)


def get_abi(contract_name: str, artifacts_dir: Optional[Union[str, Path]] = None) -> list:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Optional artifacts directory override

    Returns:
        Contract ABI as a list
    """
    artifact = load_artifact(contract_name, artifacts_dir)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str, artifacts_dir: Optional[Union[str, Path]] = None) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Optional artifacts directory override

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    artifact = load_artifact(contract_name, artifacts_dir)
    return artifact.get('bytecode', '0x')


def get_contract_metadata(
    contract_name: str,
    artifacts_dir: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Get metadata about the contract compilation.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Optional artifacts directory override

    Returns:
        Dictionary containing contract and source names, compiler info, etc.
    """
    artifact = load_artifact(contract_name, artifacts_dir)

    return {
        'contractName': artifact.get('contractName'),
        'sourceName': artifact.get('sourceName'),
        'compiler': artifact.get('compiler'),
        'networks': artifact.get('networks', {}),
        # Hardhat writes the schema under "_format"
        'schemaVersion': artifact.get('schemaVersion', artifact.get('_format')),
    }


def list_available_contracts() -> list:
    """
    List all contracts the loader knows about.

    Returns:
        List of contract names
    """
    return list(CONTRACT_PATHS.keys())


def validate_artifacts(artifacts_dir: Optional[Union[str, Path]] = None) -> Dict[str, bool]:
    """
    Validate that every expected artifact is present and deployable.

    An artifact counts as valid when it loads and carries both an ABI and
    non-empty bytecode.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            artifact = load_artifact(contract_name, artifacts_dir)
        except (FileNotFoundError, ValueError):
            status[contract_name] = False
            continue

        bytecode = artifact.get('bytecode', '0x')
        status[contract_name] = bool(artifact.get('abi')) and bytecode not in ('', '0x')

    return status
