# decor_allocator/allocation/validator.py
"""Allocation validation"""
from typing import List
from decor_allocator.config import CAP, CHANNELS
from decor_allocator.models import Catalog, TownResult, AllocationRequest, AllocationResult
from decor_allocator.utils import is_allowed_in_town


class AllocationValidator:
    """Validates allocation results against capacity, gating and conservation"""

    def __init__(self, catalog: Catalog, cap: int = CAP):
        self.catalog = catalog
        self.cap = cap

    def validate(self, request: AllocationRequest, result: AllocationResult) -> List[str]:
        """Validate result against hard constraints"""
        issues = []

        for town, town_result in result.towns.items():
            issues.extend(self._check_capacity(town_result))

            for name, count in town_result.decoration_totals().items():
                decoration = self.catalog.get(name)
                if decoration is None:
                    issues.append(f"❌ UNKNOWN: {town} was assigned {count} x {name}")
                    continue
                if not is_allowed_in_town(decoration.category, town, request.valhalla_only):
                    issues.append(
                        f"❌ CATEGORY: {town} holds {count} x {name} "
                        f"({decoration.category}) with Valhalla-only gating on"
                    )

        # Check conservation
        assigned = result.assigned()
        for name, requested in request.quantities.items():
            total = assigned.get(name, 0) + result.pool.remaining(name)
            if total != requested:
                issues.append(
                    f"❌ CONSERVATION: {name} requested {requested}, "
                    f"assigned {assigned.get(name, 0)} + remaining "
                    f"{result.pool.remaining(name)} = {total}"
                )
        for name in assigned:
            if name not in request.quantities:
                issues.append(f"❌ CONSERVATION: {name} assigned but never requested")

        return issues

    def _check_capacity(self, town_result: TownResult) -> List[str]:
        issues = []
        for index, channel in enumerate(CHANNELS):
            total = getattr(town_result, channel)
            if total <= self.cap:
                continue

            topper_weight = sum(
                self.catalog.get(name).weight[index]
                for name in town_result.toppers
                if name in self.catalog
            )
            if total - topper_weight <= self.cap:
                issues.append(
                    f"⚠️ TOPPER: {town_result.town} {channel} at {total}/{self.cap} "
                    f"after toppers {', '.join(town_result.toppers)}"
                )
            else:
                issues.append(
                    f"❌ CAPACITY: {town_result.town} {channel} at {total}, "
                    f"max is {self.cap}"
                )
        return issues
