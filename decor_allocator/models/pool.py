# decor_allocator/models/pool.py
"""Remaining-quantity pool shared by the towns of one allocation run"""
from typing import Dict, Optional
from decor_allocator.utils import parse_quantity


class QuantityPool:
    """Mutable decoration name -> units still available to place"""

    def __init__(self, quantities: Optional[Dict[str, int]] = None):
        self._counts: Dict[str, int] = {}
        for name, quantity in (quantities or {}).items():
            self._counts[name] = parse_quantity(name, quantity)

    def remaining(self, name: str) -> int:
        return self._counts.get(name, 0)

    def __contains__(self, name: str) -> bool:
        return name in self._counts

    def has(self, name: str) -> bool:
        return self.remaining(name) > 0

    def take(self, name: str) -> None:
        """Consume one unit"""
        if self.remaining(name) <= 0:
            raise ValueError(f"No units of {name!r} left in pool")
        self._counts[name] -= 1

    def to_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"QuantityPool({sum(self._counts.values())} units, {len(self._counts)} names)"
