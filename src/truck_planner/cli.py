from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from truck_planner.config import load_config
from truck_planner.export import build_export, export_filename
from truck_planner.metrics import solution_stats
from truck_planner.models import BoxDefinition, TruckType
from truck_planner.packing.cancellation import Cancellation, OptimizationCancelled
from truck_planner.packing.ranker import calculate_optimal_arrangements
from truck_planner.packing.single_truck import plan_single_truck
from truck_planner.trucks import default_trucks, get_truck

logger = logging.getLogger(__name__)


def positive_seconds(value: str) -> float:
    seconds = float(value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be greater than 0, got {value}")
    return seconds


def load_input(path: Path, truck_id: str | None = None):
    """
    Read a planning request.

    The truck comes from --truck-id, then 'truck' (explicit dims), then
    'truck_id' / 'truck_preset'. 'trucks' is the catalog for multi mode and
    falls back to the built-in presets.
    """
    data = json.loads(path.read_text(encoding="utf-8"))

    truck: TruckType | None = None
    if truck_id is not None:
        truck = get_truck(truck_id)
    elif "truck" in data:
        truck = TruckType(**data["truck"])
    elif "truck_id" in data or "truck_preset" in data:
        truck = get_truck(data.get("truck_id", data.get("truck_preset")))

    if "trucks" in data:
        trucks = [TruckType(**t) for t in data["trucks"]]
    else:
        trucks = default_trucks()

    boxes = [BoxDefinition(**b) for b in data.get("boxes", [])]
    return truck, trucks, boxes


def run_single(truck: TruckType | None, boxes: list[BoxDefinition], cancellation: Cancellation | None) -> dict[str, Any]:
    result = plan_single_truck(truck, boxes, load_config(), cancellation)
    stats = result.stats

    print(f"🚚 Truck    : {truck.name + ' (' + truck.id + ')' if truck else '(none)'}")
    print(f"✅ Placed   : {stats.placed_boxes}/{stats.total_boxes}")
    print(f"❌ Unplaced : {stats.unplaced_boxes}")
    print(f"📊 Space used {stats.utilization:.1f}%, placement rate {stats.efficiency:.1f}%")

    return build_export("single", boxes, stats, truck=truck, arrangement=result.placements)


def run_multi(trucks: list[TruckType], boxes: list[BoxDefinition], cancellation: Cancellation | None) -> dict[str, Any]:
    solutions = calculate_optimal_arrangements(trucks, boxes, load_config(), cancellation)
    recommended = solutions[0] if solutions else None
    stats = solution_stats(recommended)

    if not solutions:
        print("❌ No truck in the catalog can take any of the boxes")
    for rank, s in enumerate(solutions, start=1):
        marker = "⭐" if rank == 1 else "  "
        print(
            f"{marker} {rank}. {s.strategy:<16} trucks={s.total_trucks} "
            f"placed={s.total_boxes_placed}/{s.total_boxes} "
            f"utilization={s.overall_utilization:.1f}% score={s.overall_score:.2f}"
        )
        for t in s.trucks:
            print(f"       - {t.truck_name}: {t.box_count} boxes, {t.utilization:.1f}%")

    return build_export("multi", boxes, stats, solution=recommended, all_solutions=solutions)


def write_export(document: dict, path: str) -> None:
    """
    Write the export document as JSON (indent=2, sort_keys=True).

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, sort_keys=True)
    logger.info(f"export written to {output_path}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Truck Planner CLI")
    parser.add_argument("--input", required=True, help="Input JSON with boxes and truck(s)")
    parser.add_argument(
        "--output",
        help="Write the export document to this JSON file, or into this folder as truck-loading-<mode>-<date>.json",
    )
    parser.add_argument(
        "--mode",
        choices=["single", "multi"],
        default="single",
        help="single = lay out one chosen truck, multi = pick and rank truck combinations",
    )
    parser.add_argument("--truck-id", help="Built-in truck preset to use in single mode")
    parser.add_argument("--timeout", type=positive_seconds, help="Give up after this many seconds")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    truck, trucks, boxes = load_input(Path(args.input), args.truck_id)
    cancellation = Cancellation(timeout=args.timeout) if args.timeout is not None else None

    try:
        if args.mode == "multi":
            document = run_multi(trucks, boxes, cancellation)
        else:
            document = run_single(truck, boxes, cancellation)
    except OptimizationCancelled as e:
        print(f"⏱️ {e}")
        return 2

    if args.output:
        output = Path(args.output)
        if output.is_dir():
            output = output / export_filename(args.mode)
        write_export(document, str(output))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
