# decor_allocator/models/decoration.py
"""Decoration and catalog models"""
from typing import List, Dict, Any, Optional, Tuple


class Decoration:
    """Represents a decoration type and the hearts it adds per channel"""

    def __init__(self, data: Dict[str, Any]):
        self.name: str = data['name']
        self.category: str = data.get('category', '')
        self.green: int = data.get('green', 0)
        self.blue: int = data.get('blue', 0)
        self.red: int = data.get('red', 0)
        for channel in ('green', 'blue', 'red'):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"Decoration {self.name!r} has invalid {channel} weight: {value!r}"
                )
        self._raw_data = data

    @property
    def weight(self) -> Tuple[int, int, int]:
        """(green, blue, red)"""
        return (self.green, self.blue, self.red)

    @property
    def is_valhalla(self) -> bool:
        """Check if decoration belongs to the Valhalla category"""
        from decor_allocator.utils import is_valhalla_category
        return is_valhalla_category(self.category)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'name': self.name,
            'category': self.category,
            'green': self.green,
            'blue': self.blue,
            'red': self.red,
        }

    def __repr__(self) -> str:
        return f"Decoration({self.name}, {self.category}, {self.weight})"


class Catalog:
    """Read-only, ordered table of decoration types"""

    def __init__(self, decorations: List[Decoration]):
        self._decorations = list(decorations)
        self._by_name = {d.name: d for d in self._decorations}

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> 'Catalog':
        return cls([Decoration(r) for r in records])

    def get(self, name: str) -> Optional[Decoration]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [d.name for d in self._decorations]

    def categories(self) -> Dict[str, List[Decoration]]:
        """Group decorations by category, keeping catalog order"""
        groups: Dict[str, List[Decoration]] = {}
        for decoration in self._decorations:
            groups.setdefault(decoration.category, []).append(decoration)
        return groups

    def to_records(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self._decorations]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(self._decorations)

    def __len__(self) -> int:
        return len(self._decorations)

    def __repr__(self) -> str:
        return f"Catalog({len(self._decorations)} decorations)"
