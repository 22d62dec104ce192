from __future__ import annotations

import logging
import re

import pytest

from loxpool.logging_config import VERBOSE_LEVEL, ElapsedMsFormatter, setup_logging
from loxpool.value_model import ValueArray


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kwargs", "level"),
    [
        ({}, logging.INFO),
        ({"verbose": True}, VERBOSE_LEVEL),
        ({"debug": True}, logging.DEBUG),
        ({"debug": True, "verbose": True}, logging.DEBUG),
    ],
)
def test_setup_logging_levels(restore_root_logging: logging.Logger, kwargs: dict, level: int) -> None:
    setup_logging(**kwargs)
    assert restore_root_logging.level == level
    assert len(restore_root_logging.handlers) == 1
    assert isinstance(restore_root_logging.handlers[0].formatter, ElapsedMsFormatter)


@pytest.mark.unit
def test_verbose_level_name() -> None:
    assert logging.getLevelName(VERBOSE_LEVEL) == "VERBOSE"


@pytest.mark.unit
def test_elapsed_formatter_prefix() -> None:
    formatter = ElapsedMsFormatter("%(elapsed)s %(message)s")
    record = logging.LogRecord("loxpool", logging.INFO, __file__, 1, "hello", None, None)
    assert re.fullmatch(r"\[\s*\d+ms\] hello", formatter.format(record))


@pytest.mark.unit
def test_growth_is_logged_at_verbose(caplog: pytest.LogCaptureFixture, value_array: ValueArray) -> None:
    caplog.set_level(VERBOSE_LEVEL, logger="loxpool.value_model")
    for i in range(9):
        value_array.write(float(i))
    messages = [r.getMessage() for r in caplog.records if r.levelno == VERBOSE_LEVEL]
    assert messages == [
        "Grew value array 0 -> 8 (0 values copied)",
        "Grew value array 8 -> 16 (8 values copied)",
    ]


@pytest.mark.unit
def test_ceiling_is_logged_as_error(caplog: pytest.LogCaptureFixture) -> None:
    from loxpool.policy import GrowthPolicy

    caplog.set_level(logging.ERROR, logger="loxpool.value_model")
    array = ValueArray(policy=GrowthPolicy(min_capacity=1, max_capacity=1))
    array.write(1.0)
    array.try_write(2.0)
    assert "capacity ceiling of 1" in caplog.text


@pytest.mark.unit
def test_free_logs_once_per_release(caplog: pytest.LogCaptureFixture, value_array: ValueArray) -> None:
    caplog.set_level(logging.DEBUG, logger="loxpool")
    value_array.write(1.0)
    caplog.clear()
    value_array.free()
    value_array.free()
    assert [r.getMessage() for r in caplog.records] == [
        "Freeing value array (count=1, capacity=8)"
    ]


@pytest.mark.unit
def test_package_import_leaves_root_handlers_alone() -> None:
    import loxpool  # noqa: F401

    root = logging.getLogger()
    assert not any(isinstance(h.formatter, ElapsedMsFormatter) for h in root.handlers)
