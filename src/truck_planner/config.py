"""Packing parameters; loads overrides from the environment (and a local .env via python-dotenv)."""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "TRUCK_PLANNER_"


class PackingConfig(BaseModel):
    """Immutable engine parameters, passed explicitly to every packing call."""

    model_config = ConfigDict(frozen=True)

    min_spacing: float = Field(default=50.0, gt=0, description="Minimum clearance between boxes in mm")
    # Declared for display only; clearance has no upper bound.
    max_spacing: float = Field(default=100.0, ge=0, description="Nominal maximum clearance in mm")
    max_overhang: float = Field(default=100.0, ge=0, description="Allowed overhang per edge in mm")
    grid_step: float = Field(default=100.0, gt=0, description="Position scan step in mm")
    max_trucks: int = Field(default=15, ge=1, description="Safety cap on trucks per solution")
    truck_unit_cost: float = Field(default=1000.0, ge=0, description="Flat cost per truck used")


DEFAULT_CONFIG = PackingConfig()


def load_config(env: dict[str, str] | None = None) -> PackingConfig:
    """
    Build a PackingConfig from TRUCK_PLANNER_* variables.

    Args:
        env: Mapping to read instead of os.environ (a local .env is only loaded
            when reading the real environment)

    Returns:
        PackingConfig with defaults for any variable that is not set
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    overrides: dict[str, Any] = {}
    for field_name in PackingConfig.model_fields:
        value = env.get(ENV_PREFIX + field_name.upper())
        if value is not None and value.strip() != "":
            overrides[field_name] = value.strip()

    return PackingConfig(**overrides)
