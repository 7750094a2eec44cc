"""Truck selection: trial-pack every candidate truck and keep the best one for a strategy."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from truck_planner.config import DEFAULT_CONFIG, PackingConfig
from truck_planner.models import BoxInstance, PackingResult, TruckType
from truck_planner.packing.cancellation import Cancellation, check_cancelled
from truck_planner.packing.single_truck import pack_truck
from truck_planner.packing.strategies import Priority, truck_choice_score

logger = logging.getLogger(__name__)


@dataclass
class TruckChoice:
    truck: TruckType
    score: float
    result: PackingResult
    waste_ratio: float
    box_fit_ratio: float

    @property
    def placed_count(self) -> int:
        return len(self.result.placements)


def score_truck(
    truck: TruckType,
    remaining: list[BoxInstance],
    priority: Priority,
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> TruckChoice | None:
    """
    Trial-pack the whole remaining pool into one truck and score it.

    Returns None when the truck cannot take a single box.
    """
    result = pack_truck(truck, remaining, config, cancellation)
    placed = len(result.placements)
    if placed == 0:
        return None

    truck_area = result.truck_area
    waste_ratio = (truck_area - result.used_area) / truck_area if truck_area > 0 else 0.0
    box_fit_ratio = placed / len(remaining) if remaining else 0.0
    score = truck_choice_score(priority, result.utilization, waste_ratio, box_fit_ratio, placed)

    return TruckChoice(
        truck=truck,
        score=score,
        result=result,
        waste_ratio=waste_ratio,
        box_fit_ratio=box_fit_ratio,
    )


def select_truck(
    trucks: list[TruckType],
    remaining: list[BoxInstance],
    priority: Priority,
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> TruckChoice | None:
    """
    Pick the truck to load next.

    Args:
        trucks: Candidate truck types, smallest floor area first
        remaining: Box instances not yet loaded
        priority: Scoring policy

    Returns:
        The highest-scoring TruckChoice (the first one wins on equal scores),
        or None when no truck can take any remaining box
    """
    best: TruckChoice | None = None

    for truck in trucks:
        check_cancelled(cancellation)
        choice = score_truck(truck, remaining, priority, config, cancellation)
        if choice is None:
            logger.debug(f"truck {truck.id} rejected: no box fits")
            continue

        logger.debug(
            f"truck {truck.id} score={choice.score:.2f} placed={choice.placed_count} "
            f"waste_ratio={choice.waste_ratio:.3f}"
        )
        if best is None or choice.score > best.score:
            best = choice

    return best
