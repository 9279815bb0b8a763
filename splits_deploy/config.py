"""
Deployment configuration.

Settings come from the environment, with a ``.env`` file in the working
directory loaded first. Keyword overrides (e.g. from CLI flags) take
precedence over both.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .artifacts.loader import ARTIFACTS_DIR_ENV

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_TX_TIMEOUT = 120
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DeployConfig:
    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    artifacts_dir: Optional[str] = None
    tx_timeout: int = DEFAULT_TX_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(**overrides) -> DeployConfig:
    """
    Build a DeployConfig from the environment.

    Overrides whose value is None are ignored so that unset CLI flags fall
    through to the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    config = DeployConfig(
        rpc_url=os.getenv("RPC_URL", DEFAULT_RPC_URL),
        private_key=os.getenv("PRIVATE_KEY") or None,
        artifacts_dir=os.getenv(ARTIFACTS_DIR_ENV) or None,
        tx_timeout=_int_from_env("TX_TIMEOUT", DEFAULT_TX_TIMEOUT),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )

    for key, value in overrides.items():
        if not hasattr(config, key):
            raise TypeError(f"Unknown configuration option: {key}")
        if value is not None:
            setattr(config, key, value)

    if config.log_level not in LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}"
        )

    return config
