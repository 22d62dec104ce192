"""Owned float64 buffers: acquisition and reallocate-and-copy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

import numpy as np

from loxpool.error_msg import AllocationError

logger = logging.getLogger("loxpool.memory")

VALUE_DTYPE = np.float64


@dataclass
class AllocationStats:
    """Bookkeeping for buffer growth on one array.

    ``allocations`` counts every buffer acquired, ``reallocations`` only those
    that replaced an existing buffer, and ``elements_copied`` the values moved
    across all reallocations.
    """

    allocations: int = 0
    reallocations: int = 0
    elements_copied: int = 0

    def reset(self) -> None:
        self.allocations = 0
        self.reallocations = 0
        self.elements_copied = 0


def reallocate(
    buffer: Optional[np.ndarray],
    count: int,
    new_capacity: int,
    stats: Optional[AllocationStats] = None,
) -> np.ndarray:
    """
    Acquire a buffer of ``new_capacity`` values holding the first ``count``
    values of ``buffer`` at the same indices.

    Args:
        buffer: Current buffer, or None when nothing is allocated yet
        count: Number of live values at the front of ``buffer``
        new_capacity: Slot count of the new buffer, must be >= count
        stats: Optional counters updated on success

    Returns:
        The new buffer. ``buffer`` is not modified and can be dropped.

    Raises:
        AllocationError: if the new buffer cannot be allocated
    """
    if new_capacity < count:
        raise ValueError(
            f"new_capacity {new_capacity} cannot hold {count} existing values"
        )

    try:
        new_buffer = np.empty(new_capacity, dtype=VALUE_DTYPE)
    except (MemoryError, ValueError) as e:
        logger.error("Could not allocate %d values: %s", new_capacity, e)
        raise AllocationError(
            "Could not grow value array",
            requested_capacity=new_capacity,
            detail=str(e),
        ) from e

    if buffer is not None and count:
        new_buffer[:count] = buffer[:count]

    if stats is not None:
        stats.allocations += 1
        if buffer is not None:
            stats.reallocations += 1
            stats.elements_copied += count
    return new_buffer
