"""Constant pool dumps for disassembly output."""

from typing import IO, List, Optional, Tuple
import sys

from loxpool.value_model import ValueArray, format_value

HEADER = ("CONSTANT INDEX", "CONSTANT VALUE")


def constant_rows(array: ValueArray) -> List[Tuple[str, str]]:
    """
    Tabulate a constant pool.

    Returns:
        Header row followed by one (index, rendered value) row per constant.
    """
    rows: List[Tuple[str, str]] = [HEADER]
    for index, value in enumerate(array):
        rows.append((str(index), format_value(value)))
    return rows


def print_constant_pool(
    array: ValueArray, name: str = "constants", file: Optional[IO[str]] = None
) -> None:
    """Print every constant of the pool with its index"""
    out = sys.stdout if file is None else file
    out.write(f"== {name} ==\n")
    for index, value in enumerate(array):
        out.write(f"{index:4d} '{format_value(value)}'\n")
    out.write(f"Total constants: {array.count}\n")
    out.write(f"Capacity: {array.capacity}\n")
