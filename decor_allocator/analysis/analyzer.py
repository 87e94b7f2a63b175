# decor_allocator/analysis/analyzer.py
"""Data analysis functionality"""
from typing import Dict, Any, List
from decor_allocator.config import CAP, CHANNELS, EVERGARDEN
from decor_allocator.models import Catalog, TownResult, AllocationRequest, AllocationResult


class RequestAnalyzer:
    """Analyzes an allocation request before it is run"""

    @staticmethod
    def analyze(request: AllocationRequest, catalog: Catalog) -> Dict[str, Any]:
        """Summarize requested units by category and total hearts on offer"""
        analysis = {
            'total_towns': len(request.towns),
            'has_evergarden': EVERGARDEN in request.towns,
            'total_units': 0,
            'valhalla_units': 0,
            'units_by_category': {},
            'unknown_decorations': [],
            'hearts_available': {channel: 0 for channel in CHANNELS},
            'hearts_capacity': len(request.towns) * CAP,
        }

        for name, quantity in request.quantities.items():
            decoration = catalog.get(name)
            if decoration is None:
                analysis['unknown_decorations'].append(name)
                continue
            if quantity <= 0:
                continue

            analysis['total_units'] += quantity
            if decoration.is_valhalla:
                analysis['valhalla_units'] += quantity

            category = decoration.category
            analysis['units_by_category'][category] = (
                analysis['units_by_category'].get(category, 0) + quantity
            )

            for channel in CHANNELS:
                analysis['hearts_available'][channel] += getattr(decoration, channel) * quantity

        return analysis


class MetricsCalculator:
    """Calculates metrics from allocation results"""

    @staticmethod
    def balance_spread(town_result: TownResult) -> int:
        """|g-b| + |g-r| + |b-r| of a town's totals"""
        green, blue, red = town_result.totals
        return abs(green - blue) + abs(green - red) + abs(blue - red)

    @staticmethod
    def aggregate(town_result: TownResult, order: List[str]) -> List[Dict[str, Any]]:
        """Per-name totals for a town, sorted by the given name order"""
        totals = town_result.decoration_totals()
        position = {name: index for index, name in enumerate(order)}
        names = sorted(totals, key=lambda name: position.get(name, len(position)))
        return [{'name': name, 'quantity': totals[name]} for name in names]

    @staticmethod
    def calculate(request: AllocationRequest, result: AllocationResult,
                  catalog: Catalog, cap: int = CAP) -> Dict[str, Any]:
        """Calculate actual metrics from the allocation"""
        input_order = list(request.quantities)

        assigned = result.assigned()
        unused = result.unused()

        towns = {}
        towns_used = 0
        utilization_total = 0.0

        for town, town_result in result.towns.items():
            if not town_result.is_empty:
                towns_used += 1

            utilization = max(town_result.totals) / cap if cap > 0 else 0
            utilization_total += utilization

            towns[town] = {
                'green': town_result.green,
                'blue': town_result.blue,
                'red': town_result.red,
                'items': len(town_result.decorations),
                'toppers': len(town_result.toppers),
                'balance_spread': MetricsCalculator.balance_spread(town_result),
                'utilization': utilization,
                'decorations': MetricsCalculator.aggregate(town_result, input_order),
            }

        total_requested = sum(q for name, q in request.quantities.items() if name in catalog)

        return {
            'total_requested': total_requested,
            'total_assigned': sum(assigned.values()),
            'total_unused': sum(count for name, count in unused.items() if name in catalog),
            'total_abandoned': sum(result.abandoned.values()),
            'towns_used': towns_used,
            'average_utilization': utilization_total / len(towns) if towns else 0,
            'towns': towns,
        }
