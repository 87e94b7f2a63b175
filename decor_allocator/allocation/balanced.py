# decor_allocator/allocation/balanced.py
"""Balanced strategy: spread each decoration round-robin across towns"""
from typing import List, Tuple
from decor_allocator.config import CAP, EVERGARDEN
from decor_allocator.models import Catalog, Decoration, QuantityPool, AllocationResult


class BalancedStrategy:
    """Round-robin distribution with a single cursor shared by all decorations"""

    def __init__(self, catalog: Catalog, cap: int = CAP):
        self.catalog = catalog
        self.cap = cap

    def allocate(self, result: AllocationResult, valhalla_only: bool) -> AllocationResult:
        """Distribute result.pool over result's towns, consuming the pool in place"""
        pool = result.pool
        valhalla, others = self.partition(pool)

        if valhalla_only and EVERGARDEN in result:
            self._fill_evergarden(result, valhalla)

        distribution = others if valhalla_only else valhalla + others

        towns = list(result.towns)
        cursor = 0
        for decoration in distribution:
            cursor = self._distribute(result, decoration, towns, cursor, valhalla_only)

        return result

    def partition(self, pool: QuantityPool) -> Tuple[List[Decoration], List[Decoration]]:
        """Split requested decorations into (Valhalla, other), keeping catalog order.

        Empty entries are dropped from the other group only.
        """
        valhalla, others = [], []
        for decoration in self.catalog:
            if decoration.name not in pool:
                continue
            if decoration.is_valhalla:
                valhalla.append(decoration)
            elif pool.has(decoration.name):
                others.append(decoration)
        return valhalla, others

    def _fill_evergarden(self, result: AllocationResult, valhalla: List[Decoration]) -> None:
        # Units that do not fit stay in the pool; they are not rerouted
        evergarden = result[EVERGARDEN]
        for decoration in valhalla:
            while result.pool.has(decoration.name) and evergarden.fits(decoration, self.cap):
                evergarden.add(decoration)
                result.pool.take(decoration.name)

    def _distribute(self, result: AllocationResult, decoration: Decoration,
                    towns: List[str], cursor: int, valhalla_only: bool) -> int:
        """Hand out one decoration's units; return the cursor for the next one.

        Gives up once every town has been passed over in a row without a
        placement, leaving the remainder in the pool as abandoned.
        """
        pool = result.pool
        misses = 0
        while pool.has(decoration.name):
            if misses >= len(towns):
                self._abandon(result, decoration)
                break

            town = towns[cursor]
            town_result = result[town]
            if valhalla_only and town == EVERGARDEN:
                misses += 1
            elif town_result.fits(decoration, self.cap):
                town_result.add(decoration)
                pool.take(decoration.name)
                misses = 0
            else:
                misses += 1

            cursor = (cursor + 1) % len(towns)

        return cursor

    @staticmethod
    def _abandon(result: AllocationResult, decoration: Decoration) -> None:
        remaining = result.pool.remaining(decoration.name)
        result.abandoned[decoration.name] = result.abandoned.get(decoration.name, 0) + remaining
        result.warnings.append(
            f"{remaining} x {decoration.name} could not be placed: "
            f"no town can take another unit"
        )
