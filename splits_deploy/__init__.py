"""
Splits local deployment package

Deploys the Token and SplitsWarehouseMock contracts from their compiled
Hardhat artifacts to an Ethereum JSON-RPC node.
"""

__version__ = "0.1.0"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
    get_contract_metadata,
    list_available_contracts,
    validate_artifacts,
)

from .contracts.token import TokenContract
from .contracts.splits_warehouse import SplitsWarehouseMockContract
from .config import DeployConfig, load_config
from .deployer import DeployedContract, Deployer
from .errors import DeploymentError

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'get_contract_metadata',
    'list_available_contracts',
    'validate_artifacts',
    'TokenContract',
    'SplitsWarehouseMockContract',
    'DeployConfig',
    'load_config',
    'DeployedContract',
    'Deployer',
    'DeploymentError',
]
