"""
Contract deployment over web3.py.

The Deployer owns the signer used for every deployment. With a private key
it signs transactions locally; without one it sends them from the first
account the node manages, which is what a local Hardhat node exposes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from web3 import Web3

from .config import DeployConfig
from .errors import DeploymentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeployedContract:
    name: str
    address: str
    tx_hash: str
    block_number: int


def connect(rpc_url: str, timeout: int = 30) -> Web3:
    """Open an HTTP connection to the node at rpc_url."""
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))

    if not w3.is_connected():
        raise DeploymentError(f"Could not connect to RPC URL: {rpc_url}")

    logger.debug("Connected to %s", rpc_url)
    return w3


class Deployer:
    """Deploys contracts from a single signer."""

    def __init__(self, w3: Web3, private_key: Optional[str] = None, tx_timeout: int = 120):
        self.w3 = w3
        self.tx_timeout = tx_timeout
        self._account = w3.eth.account.from_key(private_key) if private_key else None

        if self._account is not None:
            self._address = self._account.address
        else:
            accounts = w3.eth.accounts
            if not accounts:
                raise DeploymentError(
                    "No signer available: set PRIVATE_KEY or use a node with unlocked accounts"
                )
            self._address = accounts[0]

    @classmethod
    def from_config(cls, config: DeployConfig) -> "Deployer":
        w3 = connect(config.rpc_url)
        return cls(w3, private_key=config.private_key, tx_timeout=config.tx_timeout)

    @property
    def address(self) -> str:
        return self._address

    @property
    def signs_locally(self) -> bool:
        return self._account is not None

    def get_balance(self) -> int:
        """Balance of the signer in wei."""
        return self.w3.eth.get_balance(self._address)

    def deploy(self, deployment_data: Dict[str, Any]) -> DeployedContract:
        """
        Deploy a contract and wait for it to be mined.

        Args:
            deployment_data: Dictionary with contract_name, abi, bytecode and
                constructor_args, as produced by the contract wrappers

        Returns:
            The deployed contract's address and transaction details

        Raises:
            DeploymentError: If the transaction reverts or creates no contract
        """
        name = deployment_data["contract_name"]
        factory = self.w3.eth.contract(
            abi=deployment_data["abi"],
            bytecode=deployment_data["bytecode"],
        )
        constructor = factory.constructor(*deployment_data["constructor_args"])

        if self._account is not None:
            tx = constructor.build_transaction({
                "from": self._address,
                "nonce": self.w3.eth.get_transaction_count(self._address),
                "chainId": self.w3.eth.chain_id,
            })
            signed_tx = self._account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = constructor.transact({"from": self._address})

        logger.debug("%s deployment sent: %s", name, Web3.to_hex(tx_hash))
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.tx_timeout)

        if receipt["status"] != 1:
            raise DeploymentError(f"{name} deployment reverted: {Web3.to_hex(tx_hash)}")

        address = receipt.get("contractAddress")
        if not address:
            raise DeploymentError(f"{name} deployment created no contract: {Web3.to_hex(tx_hash)}")

        return DeployedContract(
            name=name,
            address=address,
            tx_hash=Web3.to_hex(tx_hash),
            block_number=receipt["blockNumber"],
        )
