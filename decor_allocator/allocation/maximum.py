# decor_allocator/allocation/maximum.py
"""Maximum strategy: fill each town close to capacity before moving on.

Towns are processed in request order and never revisited, so earlier towns
get first pick from the shared pool. For each town the candidates are ranked
once by how balanced the town would be after one unit of each, and that
ranking is consumed as-is: a candidate is taken unit by unit until its pool
runs out or the next unit would break the cap, then the next candidate is
tried. A final topper pass may add a Meadow or Snowflake to a town whose
channel ended just below capacity.
"""
from typing import List, Tuple
from decor_allocator.config import CAP, TOPPER_RULES, TOPPER_RESPECTS_CAP
from decor_allocator.models import Catalog, Decoration, QuantityPool, TownResult, AllocationResult
from decor_allocator.utils import is_allowed_in_town


class MaximumStrategy:
    """Greedy per-town saturation with a balance-ranked candidate order"""

    def __init__(self, catalog: Catalog, cap: int = CAP,
                 topper_rules: List[Tuple[str, str, int, int]] = None,
                 topper_respects_cap: bool = TOPPER_RESPECTS_CAP):
        self.catalog = catalog
        self.cap = cap
        self.topper_rules = TOPPER_RULES if topper_rules is None else topper_rules
        self.topper_respects_cap = topper_respects_cap

    def allocate(self, result: AllocationResult, valhalla_only: bool) -> AllocationResult:
        """Fill result's towns in order, consuming result.pool in place"""
        pool = result.pool
        decorations = self._requested_decorations(pool)

        for town, town_result in result.towns.items():
            candidates = [
                d for d in decorations
                if pool.has(d.name) and is_allowed_in_town(d.category, town, valhalla_only)
            ]
            for decoration in self.rank_candidates(town_result, candidates):
                while pool.has(decoration.name) and town_result.fits(decoration, self.cap):
                    town_result.add(decoration)
                    pool.take(decoration.name)

            self._apply_toppers(town_result, pool, valhalla_only)

        return result

    @staticmethod
    def rank_candidates(town_result: TownResult, candidates: List[Decoration]) -> List[Decoration]:
        """Order candidates by balance score against the town's current totals.

        sorted() is stable, so equal scores keep the incoming order.
        """
        return sorted(candidates, key=town_result.balance_with)

    def _requested_decorations(self, pool: QuantityPool) -> List[Decoration]:
        # Catalog order; unknown names are dropped here and never leave the pool
        return [d for d in self.catalog if d.name in pool]

    def _apply_toppers(self, town_result: TownResult, pool: QuantityPool,
                       valhalla_only: bool) -> None:
        for name, channel, low, high in self.topper_rules:
            decoration = self.catalog.get(name)
            if decoration is None or not pool.has(name):
                continue
            if not is_allowed_in_town(decoration.category, town_result.town, valhalla_only):
                continue
            if not low <= getattr(town_result, channel) <= high:
                continue
            if self.topper_respects_cap and not town_result.fits(decoration, self.cap):
                continue
            town_result.add(decoration, topper=True)
            pool.take(name)
