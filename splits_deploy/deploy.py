#!/usr/bin/env python3
"""
Deploy the Token and SplitsWarehouseMock contracts.

Steps run one after another from a single signer; the first failure aborts
the remaining steps and the process exits with status 1.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import DeployConfig, load_config
from .contracts import SplitsWarehouseMockContract, TokenContract
from .deployer import DeployedContract, Deployer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class DeploymentResult:
    deployer: str
    balance: int
    token: DeployedContract
    splits_warehouse: DeployedContract


def run(
    deployer: Deployer,
    token: Optional[TokenContract] = None,
    splits_warehouse: Optional[SplitsWarehouseMockContract] = None,
) -> DeploymentResult:
    """Deploy Token, then SplitsWarehouseMock, logging each address."""
    token = token or TokenContract()
    splits_warehouse = splits_warehouse or SplitsWarehouseMockContract()

    logger.info("Deploying contracts with the account: %s", deployer.address)

    balance = deployer.get_balance()
    logger.info("Account balance: %s", str(balance))

    deployed_token = deployer.deploy(token.get_deployment_data())
    logger.info("Token deployed at: %s", deployed_token.address)

    deployed_warehouse = deployer.deploy(splits_warehouse.get_deployment_data())
    logger.info("SplitsWarehouse deployed at: %s", deployed_warehouse.address)

    return DeploymentResult(
        deployer=deployer.address,
        balance=balance,
        token=deployed_token,
        splits_warehouse=deployed_warehouse,
    )


def write_deployment_record(path: Path, result: DeploymentResult, chain_id: int) -> None:
    """Write deployed addresses as JSON for scripts that consume them later."""
    record = {
        "chainId": chain_id,
        "deployer": result.deployer,
        "contracts": {
            result.token.name: result.token.address,
            result.splits_warehouse.name: result.splits_warehouse.address,
        },
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(record, f, indent=2)
        f.write("\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="splits-deploy",
        description="Deploy the Token and SplitsWarehouseMock contracts",
    )
    parser.add_argument("--rpc-url", help="JSON-RPC endpoint (default: $RPC_URL)")
    parser.add_argument("--artifacts-dir", help="Hardhat artifacts/contracts directory")
    parser.add_argument("--log-level", help="Logging level (default: $LOG_LEVEL or INFO)")
    parser.add_argument("--output", type=Path, help="Write deployed addresses to this JSON file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config: DeployConfig = load_config(
            rpc_url=args.rpc_url,
            artifacts_dir=args.artifacts_dir,
            log_level=args.log_level.upper() if args.log_level else None,
        )
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    try:
        deployer = Deployer.from_config(config)
        result = run(
            deployer,
            token=TokenContract(config.artifacts_dir),
            splits_warehouse=SplitsWarehouseMockContract(config.artifacts_dir),
        )
        if args.output:
            write_deployment_record(args.output, result, deployer.w3.eth.chain_id)
            logger.info("Deployment record written to %s", args.output)
    except Exception:
        logger.exception("Deployment failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
