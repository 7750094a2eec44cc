from __future__ import annotations

import logging

from truck_planner.config import DEFAULT_CONFIG, PackingConfig
from truck_planner.models import BoxDefinition, MultiTruckSolution, TruckType
from truck_planner.packing.cancellation import Cancellation
from truck_planner.packing.multi_truck import optimize_multi_truck
from truck_planner.packing.strategies import STRATEGIES, Strategy

logger = logging.getLogger(__name__)


def calculate_optimal_arrangements(
    trucks: list[TruckType],
    boxes: list[BoxDefinition],
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
    strategies: tuple[Strategy, ...] = STRATEGIES,
) -> list[MultiTruckSolution]:
    """
    Solve once per strategy and rank the results.

    Solutions that use no truck are dropped. The rest are ordered by
    overall_score, highest first (ties keep strategy order); index 0 is the
    recommended solution.
    """
    solutions: list[MultiTruckSolution] = []
    for strategy in strategies:
        solution = optimize_multi_truck(trucks, boxes, strategy, config, cancellation)
        if solution.trucks:
            solutions.append(solution)

    solutions.sort(key=lambda s: s.overall_score, reverse=True)

    if solutions:
        logger.info(f"ranked {len(solutions)} solutions, recommended={solutions[0].strategy}")
    else:
        logger.info("no solution uses any truck")
    return solutions
