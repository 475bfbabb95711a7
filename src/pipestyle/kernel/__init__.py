"""Kernel layer - gates, fallbacks and zero values."""

from pipestyle.kernel.fallback import Else, Gate, coerce_else, holds
from pipestyle.kernel.zero import (
    ZeroRegistry,
    default_registry,
    is_default,
    is_value_record,
    register_zero,
    zero_of,
)

__all__ = [
    "Else",
    "Gate",
    "holds",
    "coerce_else",
    # Zero values
    "ZeroRegistry",
    "default_registry",
    "register_zero",
    "zero_of",
    "is_default",
    "is_value_record",
]
