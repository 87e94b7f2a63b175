# decor_allocator/allocation/engine.py
"""Main allocation engine"""
from typing import Dict, Any, List
from decor_allocator.models import Catalog, QuantityPool, AllocationRequest, AllocationResult
from decor_allocator.analysis import MetricsCalculator
from decor_allocator.allocation.maximum import MaximumStrategy
from decor_allocator.allocation.balanced import BalancedStrategy
from decor_allocator.allocation.validator import AllocationValidator
from decor_allocator.config import (
    CAP, CATALOG_FILE, STRATEGIES, STRATEGY_MAXIMUM, STRATEGY_BALANCED, TOPPER_RESPECTS_CAP
)


class AllocationEngine:
    """Runs one allocation request against the decoration catalog.

    Every call works on a fresh copy of the requested quantities, so nothing
    carries over between requests.
    """

    def __init__(self, catalog: Catalog = None, cap: int = CAP,
                 topper_respects_cap: bool = TOPPER_RESPECTS_CAP):
        if catalog is None:
            from decor_allocator.io import DataLoader
            catalog = DataLoader.load_catalog(CATALOG_FILE)
        self.catalog = catalog
        self.cap = cap
        self.topper_respects_cap = topper_respects_cap
        self.validator = AllocationValidator(catalog, cap)

    def allocate(self, request: AllocationRequest) -> AllocationResult:
        """Allocate with the request's strategy"""
        strategy = self._get_strategy(request.strategy)
        pool = QuantityPool(request.quantities)
        result = AllocationResult(request.towns, request.quantities, pool)
        return strategy.allocate(result, request.valhalla_only)

    def _get_strategy(self, name: str):
        if name == STRATEGY_MAXIMUM:
            return MaximumStrategy(self.catalog, self.cap,
                                   topper_respects_cap=self.topper_respects_cap)
        if name == STRATEGY_BALANCED:
            return BalancedStrategy(self.catalog, self.cap)
        raise ValueError(f"Unknown strategy {name!r}, expected one of {', '.join(STRATEGIES)}")

    def build_complete_output(self, request: AllocationRequest,
                              result: AllocationResult) -> Dict[str, Any]:
        """Build complete output with all metadata"""
        validation_issues = self.validator.validate(request, result)
        metrics = MetricsCalculator.calculate(request, result, self.catalog)

        unused = {name: count for name, count in result.unused().items() if count > 0}

        return {
            "request": request.to_dict(),
            "allocations": result.to_dict(),
            "unused": unused,
            "abandoned": dict(result.abandoned),
            "metrics": metrics,
            "validation_issues": validation_issues,
            "warnings": list(result.warnings),
            "summary": {
                "strategy": request.strategy,
                "total_towns": len(result.towns),
                "towns_used": metrics['towns_used'],
                "total_requested": metrics['total_requested'],
                "total_assigned": metrics['total_assigned'],
                "total_unused": metrics['total_unused'],
            }
        }


def _run(strategy: str, towns: List[str], quantities: Dict[str, int], valhalla_only: bool,
         catalog: Catalog = None, **engine_options) -> AllocationResult:
    engine = AllocationEngine(catalog, **engine_options)
    request = AllocationRequest(towns, quantities, valhalla_only, strategy)
    return engine.allocate(request)


def allocate_maximum(towns: List[str], quantities: Dict[str, int], valhalla_only: bool,
                     catalog: Catalog = None, **engine_options) -> AllocationResult:
    """Fill towns one at a time, in the given order"""
    return _run(STRATEGY_MAXIMUM, towns, quantities, valhalla_only, catalog, **engine_options)


def allocate_balanced(towns: List[str], quantities: Dict[str, int], valhalla_only: bool,
                      catalog: Catalog = None, **engine_options) -> AllocationResult:
    """Spread every decoration round-robin across the towns"""
    return _run(STRATEGY_BALANCED, towns, quantities, valhalla_only, catalog, **engine_options)
