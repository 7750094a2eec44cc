from __future__ import annotations

import logging

from truck_planner.config import DEFAULT_CONFIG, PackingConfig
from truck_planner.metrics import MM2_PER_M2, percent
from truck_planner.models import BoxDefinition, MultiTruckSolution, TruckSolution, TruckType
from truck_planner.packing.cancellation import Cancellation, check_cancelled
from truck_planner.packing.selector import select_truck
from truck_planner.packing.single_truck import box_area, expand_boxes
from truck_planner.packing.strategies import Strategy, solution_score

logger = logging.getLogger(__name__)


def optimize_multi_truck(
    trucks: list[TruckType],
    boxes: list[BoxDefinition],
    strategy: Strategy,
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> MultiTruckSolution:
    """
    Load boxes truck by truck under one strategy.

    Each round the selector trial-packs the whole remaining pool into every
    truck type and the winner's layout becomes the next truck. Stops when the
    pool is empty, no truck takes a box, or config.max_trucks is reached.
    Whatever is left is reported as unplaced.
    """
    total_boxes = sum(b.quantity for b in boxes)

    remaining = expand_boxes(boxes, indexed_names=True)
    remaining.sort(key=box_area, reverse=True)

    # Smallest floor first; stable, so equal areas keep catalog order
    candidates = sorted(trucks, key=lambda t: t.area)

    loaded: list[TruckSolution] = []
    total_used_area = 0.0
    total_truck_area = 0.0
    total_wasted = 0.0

    while remaining and len(loaded) < config.max_trucks:
        check_cancelled(cancellation)

        choice = select_truck(candidates, remaining, strategy.priority, config, cancellation)
        if choice is None:
            break

        # Selector's trial pack doubles as this truck's layout
        result = choice.result
        # Progress guard: stop on an unpackable remainder
        if not result.placements:
            break

        ordinal = len(loaded) + 1
        wasted = result.truck_area - result.used_area
        loaded.append(TruckSolution(
            truck_id=f"{choice.truck.id}-{ordinal}",
            truck_type=choice.truck,
            truck_name=f"{choice.truck.name} #{ordinal}",
            placements=result.placements,
            utilization=result.utilization,
            box_count=len(result.placements),
            efficiency=result.efficiency,
            wasted_space=wasted / MM2_PER_M2,
        ))

        placed_ids = {p.instance_id for p in result.placements}
        remaining = [b for b in remaining if b.instance_id not in placed_ids]

        total_used_area += result.used_area
        total_truck_area += result.truck_area
        total_wasted += wasted

        logger.debug(
            f"[{strategy.priority.value}] truck #{ordinal} {choice.truck.id}: "
            f"placed={len(result.placements)} remaining={len(remaining)}"
        )

    trucks_used = len(loaded)
    boxes_placed = total_boxes - len(remaining)
    overall_utilization = min(100.0, percent(total_used_area, total_truck_area))
    space_wastage = total_wasted / MM2_PER_M2

    solution = MultiTruckSolution(
        trucks=loaded,
        strategy=strategy.name,
        priority=strategy.priority.value,
        total_trucks=trucks_used,
        total_boxes_placed=boxes_placed,
        total_boxes=total_boxes,
        overall_utilization=overall_utilization,
        overall_score=solution_score(
            strategy.priority,
            boxes_placed,
            total_boxes,
            overall_utilization,
            trucks_used,
            space_wastage,
        ),
        unplaced_boxes=remaining,
        total_cost=trucks_used * config.truck_unit_cost,
        space_wastage=space_wastage,
    )

    logger.info(
        f"strategy={strategy.name}, trucks={trucks_used}, "
        f"placed={boxes_placed}/{total_boxes}, score={solution.overall_score:.2f}"
    )
    return solution
