import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from splits_deploy.artifacts.loader import ARTIFACTS_DIR_ENV, CONTRACT_PATHS

# STOP: creates a contract with empty runtime code.
STOP_BYTECODE = "0x00"
# PUSH1 0 PUSH1 0 REVERT
REVERT_BYTECODE = "0x60006000fd"

TOKEN_ABI: List[Dict[str, Any]] = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "symbol", "type": "string"},
            {"internalType": "uint256", "name": "initialSupply", "type": "uint256"},
        ],
    },
    {
        "type": "function",
        "name": "totalSupply",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
    },
]

SPLITS_WAREHOUSE_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "uint256", "name": "id", "type": "uint256"},
        ],
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
    },
]

ABIS = {
    "Token": TOKEN_ABI,
    "SplitsWarehouseMock": SPLITS_WAREHOUSE_ABI,
}


def write_artifact(artifacts_dir: Path, contract_name: str, bytecode: str, **extra) -> Path:
    """Write a Hardhat-format artifact for contract_name under artifacts_dir."""
    path = artifacts_dir / CONTRACT_PATHS[contract_name]
    path.parent.mkdir(parents=True, exist_ok=True)
    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": f"contracts/{contract_name}.sol",
        "abi": ABIS[contract_name],
        "bytecode": bytecode,
        "deployedBytecode": "0x",
        "linkReferences": {},
        "deployedLinkReferences": {},
    }
    artifact.update(extra)
    path.write_text(json.dumps(artifact))
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the developer's environment and .env files out of the tests."""
    for name in ("RPC_URL", "PRIVATE_KEY", "TX_TIMEOUT", "LOG_LEVEL", ARTIFACTS_DIR_ENV):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def artifacts_dir(tmp_path) -> Path:
    path = tmp_path / "artifacts" / "contracts"
    for name in CONTRACT_PATHS:
        write_artifact(path, name, STOP_BYTECODE)
    return path


@pytest.fixture
def reverting_artifacts_dir(tmp_path) -> Path:
    path = tmp_path / "reverting" / "contracts"
    write_artifact(path, "Token", REVERT_BYTECODE)
    write_artifact(path, "SplitsWarehouseMock", STOP_BYTECODE)
    return path


@pytest.fixture
def tester_w3():
    from web3 import EthereumTesterProvider, Web3

    return Web3(EthereumTesterProvider())
