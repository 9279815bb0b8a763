"""Artifact loading utilities for compiled smart contracts."""
from .loader import get_abi, get_bytecode, load_artifact, validate_artifacts

__all__ = ["get_abi", "get_bytecode", "load_artifact", "validate_artifacts"]
