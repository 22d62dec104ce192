"""Shared pytest fixtures for loxpool tests."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from loxpool.policy import (  # noqa: E402
    GROWTH_FACTOR_ENV,
    MAX_CAPACITY_ENV,
    MIN_CAPACITY_ENV,
    GrowthPolicy,
)
from loxpool.value_model import ValueArray  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast in-process tests")


@pytest.fixture(autouse=True)
def _clean_policy_env(monkeypatch: pytest.MonkeyPatch):
    for name in (MIN_CAPACITY_ENV, GROWTH_FACTOR_ENV, MAX_CAPACITY_ENV):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def default_policy() -> GrowthPolicy:
    return GrowthPolicy()


@pytest.fixture
def value_array(default_policy: GrowthPolicy):
    array = ValueArray(policy=default_policy)
    try:
        yield array
    finally:
        array.free()


@pytest.fixture
def filled_array(value_array: ValueArray):
    def _fill(values):
        return [value_array.write(v) for v in values]

    return _fill


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)
