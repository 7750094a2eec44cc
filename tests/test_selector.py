from __future__ import annotations

import pytest

from truck_planner.models import BoxDefinition, TruckType
from truck_planner.packing.selector import score_truck, select_truck
from truck_planner.packing.single_truck import expand_boxes
from truck_planner.packing.strategies import Priority, get_strategy, truck_choice_score


def big_box_pool(quantity: int = 1):
    return expand_boxes([BoxDefinition(id="1", name="Big", length=1900, width=1900, quantity=quantity)])


def test_truck_choice_score_formulas() -> None:
    # utilization 90.25%, waste 9.75%, everything fits, one box
    args = dict(utilization=90.25, waste_ratio=0.0975, box_fit_ratio=1.0, placed_count=1)

    assert truck_choice_score(Priority.TRUCK_COUNT, **args) == pytest.approx(195.375)
    assert truck_choice_score(Priority.SPACE_UTILIZATION, **args) == pytest.approx(87.325)
    assert truck_choice_score(Priority.BALANCED, **args) == pytest.approx(191.8375)


def test_score_truck_uses_trial_pack() -> None:
    truck = TruckType(id="a", name="A", length=2000, width=2000)

    choice = score_truck(truck, big_box_pool(), Priority.BALANCED)

    assert choice is not None
    assert choice.placed_count == 1
    assert choice.waste_ratio == pytest.approx(0.0975)
    assert choice.box_fit_ratio == pytest.approx(1.0)
    assert choice.score == pytest.approx(191.8375)


def test_truck_that_fits_nothing_is_rejected() -> None:
    tiny = TruckType(id="tiny", name="Tiny", length=500, width=500)
    ok = TruckType(id="ok", name="OK", length=2000, width=2000)

    assert score_truck(tiny, big_box_pool(), Priority.TRUCK_COUNT) is None

    choice = select_truck([tiny, ok], big_box_pool(), Priority.TRUCK_COUNT)
    assert choice is not None
    assert choice.truck.id == "ok"


def test_no_candidate_when_every_truck_is_rejected() -> None:
    tiny = TruckType(id="tiny", name="Tiny", length=500, width=500)

    assert select_truck([tiny], big_box_pool(), Priority.BALANCED) is None
    assert select_truck([], big_box_pool(), Priority.BALANCED) is None


def test_equal_scores_keep_first_truck() -> None:
    first = TruckType(id="first", name="First", length=2000, width=2000)
    second = TruckType(id="second", name="Second", length=2000, width=2000)

    choice = select_truck([first, second], big_box_pool(), Priority.SPACE_UTILIZATION)

    assert choice.truck.id == "first"


def test_space_utilization_prefers_snug_truck() -> None:
    snug = TruckType(id="snug", name="Snug", length=2000, width=2000)
    roomy = TruckType(id="roomy", name="Roomy", length=6000, width=2400)

    choice = select_truck([snug, roomy], big_box_pool(), Priority.SPACE_UTILIZATION)

    assert choice.truck.id == "snug"


def test_truck_count_prefers_truck_taking_more_boxes() -> None:
    snug = TruckType(id="snug", name="Snug", length=2000, width=2000)
    roomy = TruckType(id="roomy", name="Roomy", length=6000, width=2400)

    choice = select_truck([snug, roomy], big_box_pool(quantity=3), Priority.TRUCK_COUNT)

    assert choice.truck.id == "roomy"
    assert choice.placed_count == 3


def test_get_strategy() -> None:
    assert get_strategy("balanced").name == "Optimal Balance"
    assert get_strategy(Priority.TRUCK_COUNT).name == "Minimum Trucks"
    with pytest.raises(ValueError):
        get_strategy("cheapest")
