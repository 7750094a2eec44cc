"""Named scoring policies for truck selection and solution ranking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Priority(str, Enum):
    TRUCK_COUNT = "truck_count"
    SPACE_UTILIZATION = "space_utilization"
    BALANCED = "balanced"


@dataclass(frozen=True)
class Strategy:
    name: str
    priority: Priority


STRATEGIES: tuple[Strategy, ...] = (
    Strategy("Minimum Trucks", Priority.TRUCK_COUNT),
    Strategy("Space Efficient", Priority.SPACE_UTILIZATION),
    Strategy("Optimal Balance", Priority.BALANCED),
)


def get_strategy(priority: str | Priority) -> Strategy:
    key = Priority(priority)
    for strategy in STRATEGIES:
        if strategy.priority is key:
            return strategy
    raise ValueError(f"Unknown priority '{priority}'. Valid: {[p.value for p in Priority]}")


def truck_choice_score(
    priority: Priority,
    utilization: float,
    waste_ratio: float,
    box_fit_ratio: float,
    placed_count: int,
) -> float:
    """
    Score of one candidate truck's trial pack.

    utilization is a percentage, waste_ratio and box_fit_ratio are fractions.
    """
    base_score = box_fit_ratio * 100 + utilization
    size_bonus = placed_count * 10
    waste_deduction = waste_ratio * 50

    if priority is Priority.TRUCK_COUNT:
        return base_score + size_bonus - waste_deduction
    if priority is Priority.SPACE_UTILIZATION:
        return utilization - waste_ratio * 30
    return base_score + size_bonus * 0.5 - waste_deduction * 0.7


def solution_score(
    priority: Priority,
    boxes_placed: int,
    total_boxes: int,
    overall_utilization: float,
    trucks_used: int,
    space_wastage: float,
) -> float:
    """
    Overall score of a multi-truck solution. Extra trucks are penalised
    heavily; space_wastage is in m².
    """
    if trucks_used <= 0:
        return 0.0

    placed_ratio = boxes_placed / total_boxes if total_boxes > 0 else 0.0
    truck_penalty = (trucks_used - 1) * 20
    waste_penalty = space_wastage * 5

    if priority is Priority.TRUCK_COUNT:
        return placed_ratio * 100 - truck_penalty - waste_penalty
    if priority is Priority.SPACE_UTILIZATION:
        return overall_utilization - truck_penalty * 0.5
    return overall_utilization * 0.6 + placed_ratio * 40 - truck_penalty * 0.3
