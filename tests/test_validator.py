from __future__ import annotations

from decor_allocator.allocation import AllocationValidator, allocate_maximum
from decor_allocator.models import AllocationRequest, AllocationResult, QuantityPool
from decor_allocator.utils import categorize_validation_issues

from tests.utils import make_catalog, standard_catalog


def _result(towns, quantities):
    return AllocationResult(towns, quantities, QuantityPool(quantities))


def test_clean_allocation_has_no_issues() -> None:
    catalog = standard_catalog()
    request = AllocationRequest(["town1", "evergarden"], {"Tree of Life": 2, "Park": 3}, True)
    result = allocate_maximum(request.towns, request.quantities, True, catalog=catalog)

    assert AllocationValidator(catalog).validate(request, result) == []


def test_category_violation_is_reported() -> None:
    catalog = standard_catalog()
    request = AllocationRequest(["evergarden"], {"Park": 1}, True)
    result = _result(request.towns, request.quantities)
    result["evergarden"].add(catalog.get("Park"))
    result.pool.take("Park")

    issues = AllocationValidator(catalog).validate(request, result)

    assert len(issues) == 1
    assert "CATEGORY" in issues[0]


def test_capacity_violation_is_reported() -> None:
    catalog = make_catalog(("Block", "Town Essentials", 600, 0, 0))
    request = AllocationRequest(["town1"], {"Block": 2}, False)
    result = _result(request.towns, request.quantities)
    for _ in range(2):
        result["town1"].add(catalog.get("Block"))
        result.pool.take("Block")

    issues = AllocationValidator(catalog).validate(request, result)

    assert categorize_validation_issues(issues)["capacity_violations"] == 1


def test_topper_overflow_is_not_a_capacity_violation() -> None:
    catalog = standard_catalog(("Fountain", "Town Essentials", 499, 499, 499))
    request = AllocationRequest(["town1"], {"Fountain": 2, "Meadow": 1}, False)
    result = allocate_maximum(request.towns, request.quantities, False, catalog=catalog)

    breakdown = categorize_validation_issues(AllocationValidator(catalog).validate(request, result))

    assert breakdown["topper_overflows"] == 2
    assert breakdown["capacity_violations"] == 0


def test_conservation_error_is_reported() -> None:
    catalog = standard_catalog()
    request = AllocationRequest(["town1"], {"Park": 1}, False)
    result = _result(request.towns, request.quantities)
    result["town1"].add(catalog.get("Park"))

    issues = AllocationValidator(catalog).validate(request, result)

    assert categorize_validation_issues(issues)["conservation_errors"] == 1


def test_unknown_decoration_is_reported() -> None:
    catalog = standard_catalog()
    stranger = make_catalog(("Stranger", "X", 1, 1, 1)).get("Stranger")
    request = AllocationRequest(["town1"], {"Stranger": 1}, False)
    result = _result(request.towns, request.quantities)
    result["town1"].add(stranger)
    result.pool.take("Stranger")

    issues = AllocationValidator(catalog).validate(request, result)

    assert categorize_validation_issues(issues)["unknown_decorations"] == 1
