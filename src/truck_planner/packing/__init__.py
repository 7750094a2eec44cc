"""Packing engine: placement search, single-truck packer, multi-truck optimizer."""

from truck_planner.packing.cancellation import Cancellation, OptimizationCancelled
from truck_planner.packing.multi_truck import optimize_multi_truck
from truck_planner.packing.placement import find_best_position
from truck_planner.packing.ranker import calculate_optimal_arrangements
from truck_planner.packing.selector import TruckChoice, select_truck
from truck_planner.packing.single_truck import (
    calculate_arrangement,
    expand_boxes,
    pack_truck,
    plan_single_truck,
)
from truck_planner.packing.strategies import STRATEGIES, Priority, Strategy

__all__ = [
    "Cancellation",
    "OptimizationCancelled",
    "optimize_multi_truck",
    "find_best_position",
    "calculate_optimal_arrangements",
    "TruckChoice",
    "select_truck",
    "calculate_arrangement",
    "expand_boxes",
    "pack_truck",
    "plan_single_truck",
    "STRATEGIES",
    "Priority",
    "Strategy",
]
