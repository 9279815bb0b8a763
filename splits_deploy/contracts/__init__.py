"""Deployable contract wrappers."""
from .splits_warehouse import SplitsWarehouseMockContract
from .token import TokenContract

__all__ = ["SplitsWarehouseMockContract", "TokenContract"]
