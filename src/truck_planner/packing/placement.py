# src/truck_planner/packing/placement.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from truck_planner.config import DEFAULT_CONFIG, PackingConfig
from truck_planner.geometry import Rect, position_score, spacing
from truck_planner.models import Placement, TruckType
from truck_planner.packing.cancellation import Cancellation, check_cancelled

logger = logging.getLogger(__name__)


class Footprint(Protocol):
    length: float
    width: float


@dataclass(frozen=True)
class Candidate:
    """A scored position/orientation for one box."""

    x: float
    y: float
    width: float
    height: float
    rotated: bool
    score: float

    def bounds(self) -> Rect:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def orientations(box: Footprint) -> list[tuple[float, float, bool]]:
    """
    The two floor orientations as (width, height, rotated):
      unrotated: width runs along the truck length
      rotated:   turned 90°
    """
    length, width = float(box.length), float(box.width)
    return [
        (length, width, False),
        (width, length, True),
    ]


@dataclass(frozen=True)
class _Box:
    length: float
    width: float


def _axis_positions(start: float, limit: float, step: float) -> list[float]:
    positions: list[float] = []
    i = 0
    while start + i * step <= limit:
        positions.append(start + i * step)
        i += 1
    return positions


@lru_cache(maxsize=4096)
def ranked_candidates(
    truck_length: float,
    truck_width: float,
    box_length: float,
    box_width: float,
    max_overhang: float,
    grid_step: float,
) -> tuple[Candidate, ...]:
    """
    Every grid position for both orientations, best score first.

    Enumeration order is orientation, then x ascending, then y ascending; the
    sort is stable, so equal scores keep that order. Scores do not depend on
    the boxes already placed, which is what makes this cacheable.
    """
    truck = TruckType(id="", length=truck_length, width=truck_width)
    box = _Box(box_length, box_width)

    candidates: list[Candidate] = []
    for ow, oh, rotated in orientations(box):
        xs = _axis_positions(-max_overhang, truck_length + max_overhang - ow, grid_step)
        ys = _axis_positions(-max_overhang, truck_width + max_overhang - oh, grid_step)
        for x in xs:
            for y in ys:
                score = position_score(x, y, ow, oh, truck)
                candidates.append(Candidate(x, y, ow, oh, rotated, score))

    return tuple(sorted(candidates, key=lambda c: -c.score))


def is_valid_position(candidate: Rect, existing: list[Rect], min_spacing: float) -> bool:
    """A position is valid when it keeps at least min_spacing from every placed box."""
    for other in existing:
        if spacing(candidate, other) < min_spacing:
            return False
    return True


def find_best_position(
    truck: TruckType,
    box: Footprint,
    existing_placements: list[Placement],
    config: PackingConfig = DEFAULT_CONFIG,
    cancellation: Cancellation | None = None,
) -> Candidate | None:
    """
    Best valid position/orientation for one box against a partial layout.

    Among all valid grid positions of both orientations the highest
    position_score wins; returns None when no position keeps the minimum
    spacing to every placed box.
    """
    check_cancelled(cancellation)

    existing = [p.bounds() for p in existing_placements]
    candidates = ranked_candidates(
        float(truck.length),
        float(truck.width),
        float(box.length),
        float(box.width),
        float(config.max_overhang),
        float(config.grid_step),
    )

    # Candidates are already in final rank order, so the first valid one is the best.
    for candidate in candidates:
        if is_valid_position(candidate.bounds(), existing, config.min_spacing):
            return candidate

    logger.debug(
        f"no position for {box.length}x{box.width} in truck {truck.id} "
        f"({len(existing_placements)} boxes placed)"
    )
    return None
