# decor_allocator/utils.py
"""Utility functions"""
import os
import re
from datetime import datetime
from typing import List, Dict


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    if path:
        os.makedirs(path, exist_ok=True)


def categorize_validation_issues(issues: List[str]) -> Dict[str, int]:
    """Categorize and count validation issues"""
    categories = {
        'capacity_violations': 0,
        'topper_overflows': 0,
        'category_violations': 0,
        'conservation_errors': 0,
        'unknown_decorations': 0,
        'other': 0
    }

    for issue in issues:
        if 'CAPACITY' in issue:
            categories['capacity_violations'] += 1
        elif 'TOPPER' in issue:
            categories['topper_overflows'] += 1
        elif 'CATEGORY' in issue:
            categories['category_violations'] += 1
        elif 'CONSERVATION' in issue:
            categories['conservation_errors'] += 1
        elif 'UNKNOWN' in issue:
            categories['unknown_decorations'] += 1
        else:
            categories['other'] += 1

    return categories


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S')


def sanitize_id(name: str) -> str:
    """Replace characters that are unsafe in widget keys with hyphens"""
    return re.sub(r'[^a-zA-Z0-9_-]', '-', name)


def town_display_name(town: str) -> str:
    from decor_allocator.config import TOWN_NAMES
    return TOWN_NAMES.get(town, town)


def is_valhalla_category(category: str) -> bool:
    """Check if a category tag is the gated Valhalla category"""
    from decor_allocator.config import VALHALLA_CATEGORY
    return category == VALHALLA_CATEGORY


def is_allowed_in_town(category: str, town: str, valhalla_only: bool) -> bool:
    """Check category gating: with valhalla_only, Valhalla items go to Evergarden only"""
    from decor_allocator.config import EVERGARDEN
    if not valhalla_only:
        return True
    if town == EVERGARDEN:
        return is_valhalla_category(category)
    return not is_valhalla_category(category)


def parse_quantity(name: str, value) -> int:
    """Coerce a requested quantity to a non-negative int; blank counts as zero"""
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid quantity for {name!r}: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Non-integral quantity for {name!r}: {value!r}")
        value = int(value)
    try:
        quantity = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid quantity for {name!r}: {value!r}")
    if quantity < 0:
        raise ValueError(f"Negative quantity for {name!r}: {quantity}")
    return quantity
