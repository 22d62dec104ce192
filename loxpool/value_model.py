"""Growable array of float64 values backing a compiler constant pool."""

from __future__ import annotations

from typing import IO, Iterator, Optional
import logging
import sys

import numpy as np

from loxpool import memory
from loxpool.error_msg import AllocationError, ConstantIndexError, fail_allocation
from loxpool.logging_config import VERBOSE_LEVEL
from loxpool.memory import AllocationStats
from loxpool.policy import GrowthPolicy, grow_capacity, resolve_growth_policy
from loxpool.results import OperationResult

logger = logging.getLogger("loxpool.value_model")

Value = float

_NON_NUMERIC = (str, bytes, bytearray, bool, np.bool_)


def format_value(value: Value) -> str:
    """Render a value for diagnostics using %g formatting"""
    return "%g" % value


def print_value(value: Value, file: Optional[IO[str]] = None) -> None:
    """Write the diagnostic rendering of one value, without a newline"""
    out = sys.stdout if file is None else file
    out.write(format_value(value))


class ValueArray:
    """
    Append-only sequence of float64 values with an explicitly owned buffer.

    ``capacity`` is the slot count of the current buffer and ``count`` the
    number of values stored. The buffer is None while ``capacity`` is 0.
    Indices returned by :meth:`write` stay valid until :meth:`free` or
    :meth:`init`.

    Not thread-safe.
    """

    def __init__(self, policy: Optional[GrowthPolicy] = None):
        self.policy = policy if policy is not None else resolve_growth_policy()
        self.stats = AllocationStats()
        self._storage: Optional[np.ndarray] = None
        self.capacity = 0
        self.count = 0

    # ----------------- Lifecycle -----------------

    def init(self) -> None:
        """Reset to the empty state, discarding any stored values"""
        if self._storage is not None:
            logger.debug("Re-initializing value array holding %d values", self.count)
        self.free()

    def free(self) -> None:
        """Release the buffer and return to the empty state"""
        if self._storage is not None:
            logger.debug(
                "Freeing value array (count=%d, capacity=%d)", self.count, self.capacity
            )
        self._storage = None
        self.capacity = 0
        self.count = 0
        self.stats.reset()

    def __enter__(self) -> "ValueArray":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.free()

    # ----------------- Append -----------------

    def write(self, value: Value) -> int:
        """
        Append a value and return the index it was stored at.

        Grows the buffer when it is full. NaN and infinities are stored as
        given.

        Raises:
            TypeError: for strings, bytes and booleans; nothing is stored
            AllocationError: if the buffer cannot be grown; nothing is stored
        """
        if isinstance(value, _NON_NUMERIC):
            raise TypeError(
                f"Value array stores numbers, got {type(value).__name__}"
            )
        number = float(value)

        if self.count == self.capacity:
            self._grow()

        assert self._storage is not None
        self._storage[self.count] = number
        self.count += 1
        return self.count - 1

    def try_write(self, value: Value) -> OperationResult[int]:
        """Append a value, reporting allocation failure as a failed result"""
        try:
            return OperationResult.ok(self.write(value))
        except AllocationError as e:
            return OperationResult.fail(str(e))

    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = grow_capacity(old_capacity, self.policy)
        if new_capacity <= old_capacity:
            logger.error(
                "Value array reached its capacity ceiling of %d", old_capacity
            )
            fail_allocation(
                "Value array capacity ceiling reached",
                requested_capacity=old_capacity + 1,
                detail=f"max_capacity={self.policy.max_capacity}",
            )

        self._storage = memory.reallocate(
            self._storage, self.count, new_capacity, self.stats
        )
        self.capacity = new_capacity
        logger.log(
            VERBOSE_LEVEL,
            "Grew value array %d -> %d (%d values copied)",
            old_capacity,
            new_capacity,
            self.count,
        )

    # ----------------- Read-back -----------------

    def read(self, index: int) -> Value:
        """Return the value stored at ``index``"""
        if not 0 <= index < self.count:
            raise ConstantIndexError(index, self.count)
        assert self._storage is not None
        return float(self._storage[index])

    def __getitem__(self, index: int) -> Value:
        return self.read(index)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Value]:
        for index in range(self.count):
            yield self.read(index)

    def to_list(self) -> list[Value]:
        if self._storage is None:
            return []
        return self._storage[: self.count].tolist()

    @property
    def has_storage(self) -> bool:
        return self._storage is not None

    def __repr__(self) -> str:
        return f"ValueArray(count={self.count}, capacity={self.capacity})"
