"""Truck floor-plan loading optimizer."""

from truck_planner.config import PackingConfig, load_config
from truck_planner.models import (
    BoxDefinition,
    BoxInstance,
    LayoutStats,
    MultiTruckSolution,
    PackingResult,
    Placement,
    SingleTruckLayout,
    TruckSolution,
    TruckType,
)

__all__ = [
    "PackingConfig",
    "load_config",
    "BoxDefinition",
    "BoxInstance",
    "LayoutStats",
    "MultiTruckSolution",
    "PackingResult",
    "Placement",
    "SingleTruckLayout",
    "TruckSolution",
    "TruckType",
]
