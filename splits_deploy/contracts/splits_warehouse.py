"""
SplitsWarehouseMock contract wrapper for deployment.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..artifacts.loader import get_abi, get_bytecode


class SplitsWarehouseMockContract:
    """
    Wrapper for the SplitsWarehouseMock contract deployment.

    The mock stands in for the Splits warehouse in local networks and takes
    no constructor arguments.
    """

    CONTRACT_NAME = "SplitsWarehouseMock"

    def __init__(self, artifacts_dir: Optional[Union[str, Path]] = None):
        self.abi = get_abi(self.CONTRACT_NAME, artifacts_dir)
        self.bytecode = get_bytecode(self.CONTRACT_NAME, artifacts_dir)

    def get_deployment_data(self) -> Dict[str, Any]:
        """Get complete deployment data for the SplitsWarehouseMock contract."""
        if self.bytecode in ('', '0x'):
            raise ValueError(f"{self.CONTRACT_NAME} artifact has no deployable bytecode")

        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "constructor_args": [],
            "contract_name": self.CONTRACT_NAME,
        }
