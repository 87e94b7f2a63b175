# decor_allocator/models/request.py
"""Allocation request and result models"""
from typing import List, Dict, Any
from decor_allocator.config import DEFAULT_STRATEGY
from decor_allocator.models.pool import QuantityPool
from decor_allocator.models.town import TownResult
from decor_allocator.utils import parse_quantity


class AllocationRequest:
    """Ordered towns, requested quantities, gating flag and strategy"""

    def __init__(self, towns: List[str], quantities: Dict[str, int],
                 valhalla_only: bool = False, strategy: str = DEFAULT_STRATEGY):
        self.towns: List[str] = list(towns)
        self.quantities: Dict[str, int] = {
            name: parse_quantity(name, quantity) for name, quantity in quantities.items()
        }
        self.valhalla_only: bool = bool(valhalla_only)
        self.strategy: str = strategy

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AllocationRequest':
        return cls(
            towns=data.get('towns', []),
            quantities=data.get('quantities', data.get('decorationQuantities', {})),
            valhalla_only=data.get('valhalla_only', data.get('valhallaOnly', False)),
            strategy=data.get('strategy', DEFAULT_STRATEGY),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'towns': list(self.towns),
            'quantities': dict(self.quantities),
            'valhalla_only': self.valhalla_only,
            'strategy': self.strategy,
        }

    def __repr__(self) -> str:
        return (f"AllocationRequest({self.strategy}, towns={self.towns}, "
                f"valhalla_only={self.valhalla_only})")


class AllocationResult:
    """Per-town results of one allocation run plus what was left over"""

    def __init__(self, towns: List[str], requested: Dict[str, int], pool: QuantityPool):
        self.towns: Dict[str, TownResult] = {town: TownResult(town) for town in towns}
        self.requested: Dict[str, int] = dict(requested)
        self.pool = pool
        self.abandoned: Dict[str, int] = {}
        self.warnings: List[str] = []

    def __getitem__(self, town: str) -> TownResult:
        return self.towns[town]

    def __contains__(self, town: str) -> bool:
        return town in self.towns

    def assigned(self) -> Dict[str, int]:
        """Units assigned across all towns, per decoration name"""
        totals: Dict[str, int] = {}
        for town_result in self.towns.values():
            for name, count in town_result.decoration_totals().items():
                totals[name] = totals.get(name, 0) + count
        return totals

    def unused(self) -> Dict[str, int]:
        """requested - assigned, for every requested decoration"""
        assigned = self.assigned()
        return {
            name: quantity - assigned.get(name, 0)
            for name, quantity in self.requested.items()
        }

    def to_dict(self) -> Dict[str, Any]:
        """Town -> {green, blue, red, decorations}"""
        return {town: result.to_dict() for town, result in self.towns.items()}

    def __repr__(self) -> str:
        return f"AllocationResult({list(self.towns)})"
