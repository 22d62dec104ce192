"""Growth policy for the value array and its environment configuration."""

from __future__ import annotations

from typing import Mapping, Optional
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from loxpool.error_msg import PolicyConfigError

MIN_CAPACITY_ENV = "LOXPOOL_MIN_CAPACITY"
GROWTH_FACTOR_ENV = "LOXPOOL_GROWTH_FACTOR"
MAX_CAPACITY_ENV = "LOXPOOL_MAX_CAPACITY"

DEFAULT_MIN_CAPACITY = 8
DEFAULT_GROWTH_FACTOR = 2.0


class GrowthPolicy(BaseModel):
    """Capacity schedule used when an append finds the buffer full.

    ``new = max(min_capacity, old * growth_factor)``, clamped to
    ``max_capacity`` when one is set. With the defaults the schedule is
    8, 16, 32, ... which keeps total copying over N appends below 2N.
    """

    model_config = ConfigDict(frozen=True)

    min_capacity: int = Field(default=DEFAULT_MIN_CAPACITY, ge=1)
    growth_factor: float = Field(
        default=DEFAULT_GROWTH_FACTOR, gt=1.0, allow_inf_nan=False
    )
    max_capacity: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_ceiling(self) -> "GrowthPolicy":
        if self.max_capacity is not None and self.max_capacity < self.min_capacity:
            raise ValueError(
                f"max_capacity ({self.max_capacity}) must be >= "
                f"min_capacity ({self.min_capacity})"
            )
        return self


def grow_capacity(capacity: int, policy: GrowthPolicy) -> int:
    """Return the next capacity for a full buffer of ``capacity`` slots.

    Returns ``capacity`` itself when the ceiling is already reached; the caller
    treats that as an allocation failure.
    """
    if capacity < policy.min_capacity:
        new_capacity = policy.min_capacity
    else:
        # int() truncation can stall non-integral factors on small capacities
        new_capacity = max(int(capacity * policy.growth_factor), capacity + 1)

    if policy.max_capacity is not None:
        new_capacity = min(new_capacity, policy.max_capacity)
    return max(new_capacity, capacity)


def _env_value(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(name, "").strip()
    return raw or None


def resolve_growth_policy(environ: Optional[Mapping[str, str]] = None) -> GrowthPolicy:
    """Build the growth policy from ``LOXPOOL_*`` environment variables.

    Unset or blank variables fall back to the defaults.
    """
    env = os.environ if environ is None else environ
    raw = {
        "min_capacity": _env_value(env, MIN_CAPACITY_ENV),
        "growth_factor": _env_value(env, GROWTH_FACTOR_ENV),
        "max_capacity": _env_value(env, MAX_CAPACITY_ENV),
    }
    fields = {key: value for key, value in raw.items() if value is not None}
    return build_growth_policy(**fields)


def build_growth_policy(**fields: object) -> GrowthPolicy:
    """Validate policy fields, reporting problems as PolicyConfigError"""
    try:
        return GrowthPolicy(**fields)
    except ValidationError as e:
        raise PolicyConfigError("Invalid growth policy", str(e)) from e
