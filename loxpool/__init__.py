"""loxpool - growable float64 value array for bytecode constant pools."""

from loxpool.error_msg import (
    AllocationError,
    ConstantIndexError,
    LoxPoolException,
    PolicyConfigError,
)
from loxpool.memory import AllocationStats
from loxpool.policy import GrowthPolicy, grow_capacity, resolve_growth_policy
from loxpool.results import OperationResult
from loxpool.value_model import Value, ValueArray, format_value, print_value
from loxpool.version import __version__, get_version

__all__ = [
    "AllocationError",
    "AllocationStats",
    "ConstantIndexError",
    "GrowthPolicy",
    "LoxPoolException",
    "OperationResult",
    "PolicyConfigError",
    "Value",
    "ValueArray",
    "__version__",
    "format_value",
    "get_version",
    "grow_capacity",
    "print_value",
    "resolve_growth_policy",
]
