# src/truck_planner/packing/single_truck.py

from __future__ import annotations

import logging
from typing import Iterable, Union

from truck_planner.config import DEFAULT_CONFIG, PackingConfig
from truck_planner.metrics import compute_metrics, layout_stats
from truck_planner.models import (
    BoxDefinition,
    BoxInstance,
    PackingResult,
    Placement,
    SingleTruckLayout,
    TruckType,
)
from truck_planner.packing.cancellation import Cancellation
from truck_planner.packing.placement import find_best_position

logger = logging.getLogger(__name__)

BoxInput = Union[BoxDefinition, BoxInstance]


def box_area(box: BoxInput) -> float:
    return float(box.length) * float(box.width)


def expand_boxes(definitions: Iterable[BoxDefinition], indexed_names: bool = True) -> list[BoxInstance]:
    """
    Expand each definition into `quantity` instances.

    Instance ids are always '<id>-<n>' (n from 1). With indexed_names the
    instance name is '<name>-<n>', otherwise the plain definition name.
    """
    instances: list[BoxInstance] = []
    for definition in definitions:
        for i in range(definition.quantity):
            instances.append(BoxInstance(
                definition_id=definition.id,
                instance_id=f"{definition.id}-{i + 1}",
                instance_name=f"{definition.name}-{i + 1}" if indexed_names else definition.name,
                name=definition.name,
                length=definition.length,
                width=definition.width,
                color=definition.color,
            ))
    return instances


def as_instances(boxes: Iterable[BoxInput]) -> list[BoxInstance]:
    """Pass instances through; expand definitions with plain names."""
    out: list[BoxInstance] = []
    for box in boxes:
        if isinstance(box, BoxDefinition):
            out.extend(expand_boxes([box], indexed_names=False))
        else:
            out.append(box)
    return out


def pack_truck(
    truck: TruckType,
    boxes: Iterable[BoxInput],
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> PackingResult:
    """
    Largest-first packer for one truck.
    - Sorts boxes by floor area, largest first (stable for equal areas)
    - Places each box at the best valid position found by the grid search
    - Boxes with no valid position are skipped and reported as unplaced
    - Deterministic (no randomness)
    """
    instances = as_instances(boxes)
    # Big boxes first (reduces fragmentation)
    ordered = sorted(instances, key=box_area, reverse=True)

    placements: list[Placement] = []
    unplaced: list[BoxInstance] = []

    for box in ordered:
        candidate = find_best_position(truck, box, placements, config, cancellation)
        if candidate is None:
            unplaced.append(box)
            continue

        placements.append(Placement(
            box_id=box.definition_id,
            instance_id=box.instance_id,
            x=candidate.x,
            y=candidate.y,
            width=candidate.width,
            height=candidate.height,
            rotated=candidate.rotated,
            name=box.name,
            instance_name=box.instance_name,
            color=box.color,
        ))

    used_area, truck_area, utilization, efficiency = compute_metrics(truck, placements, len(instances))

    return PackingResult(
        placements=placements,
        unplaced=unplaced,
        used_area=used_area,
        truck_area=truck_area,
        utilization=utilization,
        efficiency=efficiency,
    )


def calculate_arrangement(
    truck: TruckType | None,
    boxes: list[BoxDefinition],
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> list[Placement]:
    """Single-truck mode: flat list of placements, empty when there is no truck or no boxes."""
    if truck is None or not boxes:
        return []
    return pack_truck(truck, boxes, config, cancellation).placements


def plan_single_truck(
    truck: TruckType | None,
    boxes: list[BoxDefinition],
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> SingleTruckLayout:
    """Single-truck layout plus the stats shown next to it."""
    placements = calculate_arrangement(truck, boxes, config, cancellation)
    total_boxes = sum(b.quantity for b in boxes)
    stats = layout_stats(truck, placements, total_boxes)

    if truck is not None and total_boxes:
        logger.info(
            f"truck={truck.id}, placed={stats.placed_boxes}/{stats.total_boxes}, "
            f"utilization={stats.utilization:.1f}%"
        )

    return SingleTruckLayout(truck=truck, placements=placements, stats=stats)
