# src/truck_planner/trucks.py
from __future__ import annotations

from truck_planner.models import TruckType

# Floor dimensions in mm, used when the caller does not supply its own catalog.
TRUCK_PRESETS_MM: dict[str, dict[str, object]] = {
    "1": {"name": "Compact Truck",     "length": 3000,  "width": 1800},
    "2": {"name": "Standard Truck",    "length": 6000,  "width": 2400},
    "3": {"name": "Large Truck",       "length": 9000,  "width": 2500},
    "4": {"name": "Extra Large Truck", "length": 12000, "width": 2500},
    "5": {"name": "Small Truck",       "length": 4500,  "width": 2000},
}


def get_truck(truck_id: str) -> TruckType:
    key = str(truck_id).strip()
    if key not in TRUCK_PRESETS_MM:
        raise ValueError(f"Unknown truck_id '{truck_id}'. Valid: {sorted(TRUCK_PRESETS_MM.keys())}")
    return TruckType(id=key, **TRUCK_PRESETS_MM[key])


def default_trucks() -> list[TruckType]:
    return [get_truck(truck_id) for truck_id in TRUCK_PRESETS_MM]
