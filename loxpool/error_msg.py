"""
loxpool error module - exception taxonomy for the value array
"""

from typing import NoReturn, Optional


class LoxPoolException(Exception):
    """Base exception for value array failures"""

    def __init__(self, msg: str, detail: Optional[str] = None):
        self.msg = msg
        self.detail = detail
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.detail:
            return self.msg
        return f"{self.msg}: {self.detail}"


class AllocationError(LoxPoolException, MemoryError):
    """Raised when the backing buffer cannot be grown.

    The append that triggered the growth did not happen; the array is left in
    its previous state and must not be treated as holding the value.
    """

    def __init__(
        self,
        msg: str,
        requested_capacity: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.requested_capacity = requested_capacity
        super().__init__(msg, detail)


class ConstantIndexError(LoxPoolException, IndexError):
    """Raised when reading a constant outside ``[0, count)``"""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(
            "Constant out of bounds", f"index {index} with {count} stored"
        )


class PolicyConfigError(LoxPoolException, ValueError):
    """Raised when a growth policy cannot be built from its configuration"""


def fail_allocation(
    msg: str,
    requested_capacity: Optional[int] = None,
    detail: Optional[str] = None,
) -> NoReturn:
    """Raise an allocation failure for the requested capacity"""
    raise AllocationError(msg, requested_capacity=requested_capacity, detail=detail)
