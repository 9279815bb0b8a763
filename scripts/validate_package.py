#!/usr/bin/env python3
"""Validate that the contracts to deploy have usable artifacts"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from splits_deploy.artifacts.loader import (
    load_artifact,
    list_available_contracts,
    resolve_artifacts_dir,
    validate_artifacts,
)


def validate(artifacts_dir=None):
    """Report the status of every contract the deploy script needs"""
    print(f"Validating artifacts in {resolve_artifacts_dir(artifacts_dir)}...")

    contracts = list_available_contracts()
    print(f"\nFound {len(contracts)} contracts to deploy:")

    status = validate_artifacts(artifacts_dir)
    for name in contracts:
        if status[name]:
            artifact = load_artifact(name, artifacts_dir)
            abi_len = len(artifact["abi"])
            bytecode_len = len(artifact["bytecode"])
            print(f"  ✅ {name}: {abi_len} ABI items, {bytecode_len} bytecode chars")
        else:
            print(f"  ❌ {name}: missing artifact, ABI or bytecode")

    print()
    if all(status.values()):
        print("✅ All contracts valid!")
        return 0
    else:
        print("❌ Some contracts failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate(sys.argv[1] if len(sys.argv) > 1 else None))
