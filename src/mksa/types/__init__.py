"""Data types for the mksa package."""

from mksa.types.check import CheckResult
from mksa.types.constant import Constant

__all__ = [
    "CheckResult",
    "Constant",
]
