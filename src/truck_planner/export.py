"""Export document for the active layout (single- or multi-truck)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from truck_planner.models import (
    BoxDefinition,
    LayoutStats,
    MultiTruckSolution,
    Placement,
    TruckType,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def export_filename(mode: str, when: datetime | None = None) -> str:
    when = when or _now()
    return f"truck-loading-{mode}-{when.date().isoformat()}.json"


def build_export(
    mode: str,
    boxes: list[BoxDefinition],
    stats: LayoutStats,
    truck: TruckType | None = None,
    arrangement: list[Placement] | None = None,
    solution: MultiTruckSolution | None = None,
    all_solutions: list[MultiTruckSolution] | None = None,
    when: datetime | None = None,
) -> dict[str, Any]:
    """
    JSON-serializable export of the current result.

    single: {mode, truck, boxes, arrangement, stats, exportDate}
    multi:  {mode, solution, allSolutions, boxes, stats, exportDate}
    """
    when = when or _now()
    common = {
        "boxes": [b.model_dump(mode="json") for b in boxes],
        "stats": stats.model_dump(mode="json"),
        "exportDate": when.isoformat(),
    }

    if mode == "single":
        return {
            "mode": "single",
            "truck": truck.model_dump(mode="json") if truck is not None else None,
            "arrangement": [p.model_dump(mode="json") for p in arrangement or []],
            **common,
        }
    if mode == "multi":
        return {
            "mode": "multi",
            "solution": solution.model_dump(mode="json") if solution is not None else None,
            "allSolutions": [s.model_dump(mode="json") for s in all_solutions or []],
            **common,
        }
    raise ValueError(f"Unknown export mode '{mode}'. Valid: ['multi', 'single']")
