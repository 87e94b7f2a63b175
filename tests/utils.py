"""Catalog fixtures and helpers for allocation tests."""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from decor_allocator.models import AllocationResult, Catalog

Entry = Tuple[str, str, int, int, int]

STANDARD_ENTRIES: Sequence[Entry] = (
    ("Tree of Life", "Valhalla", 50, 0, 0),
    ("Freya's Fortune", "Valhalla", 0, 50, 0),
    ("Park", "Central Park", 20, 10, 0),
    ("Lake", "Nature Reserve", 10, 10, 10),
    ("Meadow", "Nature Reserve", 3, 0, 3),
    ("Snowflake", "Reindeer Fest", 0, 4, 0),
)


def make_catalog(*entries: Entry) -> Catalog:
    return Catalog.from_records([
        {"name": name, "category": category, "green": green, "blue": blue, "red": red}
        for name, category, green, blue, red in entries
    ])


def standard_catalog(*extra: Entry) -> Catalog:
    return make_catalog(*STANDARD_ENTRIES, *extra)


def event_names(result: AllocationResult, town: str) -> list:
    return [event["name"] for event in result[town].decorations]


def conservation_gaps(requested: Dict[str, int], result: AllocationResult) -> Dict[str, int]:
    """Names whose assigned + remaining differs from what was requested."""
    assigned = result.assigned()
    gaps = {}
    for name, quantity in requested.items():
        total = assigned.get(name, 0) + result.pool.remaining(name)
        if total != quantity:
            gaps[name] = total - quantity
    return gaps
