from __future__ import annotations

import pytest

from decor_allocator.allocation import AllocationEngine, AllocationValidator
from decor_allocator.config import CAP, CHANNELS
from decor_allocator.models import AllocationRequest

from tests.utils import conservation_gaps, standard_catalog

REQUESTS = [
    (["town1", "town2", "evergarden"], {"Tree of Life": 30, "Freya's Fortune": 12, "Park": 80,
                                        "Lake": 120, "Meadow": 9, "Snowflake": 7}),
    (["evergarden"], {"Tree of Life": 40, "Park": 10}),
    (["town1", "northern1"], {"Lake": 400, "Meadow": 3}),
    ([], {"Park": 5}),
]


@pytest.mark.parametrize("strategy", ["maximum", "balanced"])
@pytest.mark.parametrize("valhalla_only", [False, True])
@pytest.mark.parametrize("towns,quantities", REQUESTS)
def test_units_are_conserved(strategy, valhalla_only, towns, quantities) -> None:
    engine = AllocationEngine(standard_catalog())
    request = AllocationRequest(towns, quantities, valhalla_only, strategy)

    result = engine.allocate(request)

    assert conservation_gaps(quantities, result) == {}


@pytest.mark.parametrize("towns,quantities", REQUESTS)
def test_gating_holds_for_both_strategies(towns, quantities) -> None:
    catalog = standard_catalog()
    engine = AllocationEngine(catalog)

    for strategy in ("maximum", "balanced"):
        result = engine.allocate(AllocationRequest(towns, quantities, True, strategy))
        for town, town_result in result.towns.items():
            for event in town_result.decorations:
                is_valhalla = catalog.get(event["name"]).is_valhalla
                assert is_valhalla == (town == "evergarden")


def test_balanced_never_exceeds_cap_on_full_catalog() -> None:
    engine = AllocationEngine()
    quantities = {name: 60 for name in engine.catalog.names()}
    request = AllocationRequest(["town1", "town2", "town3"], quantities, False, "balanced")

    result = engine.allocate(request)

    for town_result in result.towns.values():
        for channel in CHANNELS:
            assert getattr(town_result, channel) <= CAP


def test_maximum_only_exceeds_cap_through_toppers() -> None:
    engine = AllocationEngine()
    quantities = {name: 60 for name in engine.catalog.names()}
    request = AllocationRequest(["town1", "town2", "town3", "evergarden"], quantities, False)

    result = engine.allocate(request)
    issues = AllocationValidator(engine.catalog).validate(request, result)

    assert not [issue for issue in issues if "CAPACITY" in issue]


@pytest.mark.parametrize("strategy", ["maximum", "balanced"])
def test_identical_requests_give_identical_results(strategy) -> None:
    engine = AllocationEngine(standard_catalog())
    towns, quantities = REQUESTS[0]

    first = engine.allocate(AllocationRequest(towns, quantities, False, strategy))
    second = engine.allocate(AllocationRequest(towns, quantities, False, strategy))

    assert first.to_dict() == second.to_dict()


def test_request_quantities_are_not_mutated() -> None:
    engine = AllocationEngine(standard_catalog())
    request = AllocationRequest(["town1"], {"Park": 3}, False)

    engine.allocate(request)

    assert request.quantities == {"Park": 3}


def test_unknown_strategy_is_rejected() -> None:
    engine = AllocationEngine(standard_catalog())

    with pytest.raises(ValueError, match="Unknown strategy"):
        engine.allocate(AllocationRequest(["town1"], {"Park": 1}, False, "random"))


def test_negative_quantity_is_rejected() -> None:
    engine = AllocationEngine(standard_catalog())

    with pytest.raises(ValueError, match="Negative quantity"):
        engine.allocate(AllocationRequest(["town1"], {"Park": -1}, False))


def test_output_lists_one_event_per_unit() -> None:
    engine = AllocationEngine(standard_catalog())

    result = engine.allocate(AllocationRequest(["town1"], {"Park": 2}, False))

    assert result.to_dict() == {
        "town1": {
            "green": 40,
            "blue": 20,
            "red": 0,
            "decorations": [
                {"name": "Park", "quantity": 1},
                {"name": "Park", "quantity": 1},
            ],
        }
    }


def test_complete_output_reports_unused_and_summary() -> None:
    engine = AllocationEngine(standard_catalog())
    request = AllocationRequest(["evergarden"], {"Tree of Life": 1, "Park": 2}, True, "balanced")

    result = engine.allocate(request)
    output = engine.build_complete_output(request, result)

    assert output["unused"] == {"Park": 2}
    assert output["abandoned"] == {"Park": 2}
    assert output["summary"]["total_assigned"] == 1
    assert output["summary"]["towns_used"] == 1
    assert output["validation_issues"] == []
    assert len(output["warnings"]) == 1


def test_default_catalog_is_loaded() -> None:
    engine = AllocationEngine()

    assert len(engine.catalog) == 24
    assert engine.catalog.get("Meadow").weight == (3, 0, 3)
    assert engine.catalog.get("Tree of Life").is_valhalla


def test_request_accepts_camel_case_keys() -> None:
    request = AllocationRequest.from_dict({
        "towns": ["town1"],
        "decorationQuantities": {"Park": "3"},
        "valhallaOnly": True,
    })

    assert request.quantities == {"Park": 3}
    assert request.valhalla_only is True
    assert request.strategy == "maximum"


@pytest.mark.parametrize("quantity", [2.7, True, "2.5", "lots"])
def test_malformed_quantity_is_rejected(quantity) -> None:
    with pytest.raises(ValueError, match="quantity for 'Park'"):
        AllocationRequest(["town1"], {"Park": quantity}, False)


def test_integral_quantities_are_accepted() -> None:
    request = AllocationRequest(["town1"], {"Park": 2.0, "Lake": "3", "Meadow": None}, False)

    assert request.quantities == {"Park": 2, "Lake": 3, "Meadow": 0}
