"""
Token contract wrapper for deployment.

This module provides a high-level interface for preparing the deployment
of the ERC20 ``Token`` contract.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..artifacts.loader import get_abi, get_bytecode

MAX_UINT256 = 2**256 - 1


class TokenContract:
    """
    Wrapper for the Token contract deployment.

    Token is a plain ERC20 whose whole initial supply is minted to the
    deployer by its constructor.
    """

    CONTRACT_NAME = "Token"

    DEFAULT_NAME = "BlahToken"
    DEFAULT_SYMBOL = "BLAH"
    DEFAULT_INITIAL_SUPPLY = 1000000

    def __init__(self, artifacts_dir: Optional[Union[str, Path]] = None):
        """Initialize Token contract wrapper."""
        self.abi = get_abi(self.CONTRACT_NAME, artifacts_dir)
        self.bytecode = get_bytecode(self.CONTRACT_NAME, artifacts_dir)

    def encode_constructor_params(
        self,
        name: str,
        symbol: str,
        initial_supply: int
    ) -> List[Any]:
        """
        Validate constructor parameters and put them in constructor order.

        Args:
            name: Token name (e.g., "BlahToken")
            symbol: Token symbol (e.g., "BLAH")
            initial_supply: Initial supply minted to the deployer

        Returns:
            Positional constructor arguments

        Raises:
            ValueError: If validation fails
        """
        if not name:
            raise ValueError("Token name is required")

        if not symbol:
            raise ValueError("Token symbol is required")

        if isinstance(initial_supply, bool) or not isinstance(initial_supply, int):
            raise ValueError("Initial supply must be an integer")

        if initial_supply < 0 or initial_supply > MAX_UINT256:
            raise ValueError("Initial supply must fit in a uint256")

        return [name, symbol, initial_supply]

    def get_deployment_data(
        self,
        name: str = DEFAULT_NAME,
        symbol: str = DEFAULT_SYMBOL,
        initial_supply: int = DEFAULT_INITIAL_SUPPLY
    ) -> Dict[str, Any]:
        """
        Get complete deployment data for the Token contract.

        Args:
            name: Token name
            symbol: Token symbol
            initial_supply: Initial supply

        Returns:
            Dictionary with bytecode, ABI and constructor args

        Raises:
            ValueError: If the artifact has no bytecode or validation fails
        """
        if self.bytecode in ('', '0x'):
            raise ValueError(f"{self.CONTRACT_NAME} artifact has no deployable bytecode")

        constructor_args = self.encode_constructor_params(name, symbol, initial_supply)

        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "constructor_args": constructor_args,
            "contract_name": self.CONTRACT_NAME,
        }
