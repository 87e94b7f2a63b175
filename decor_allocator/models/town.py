# decor_allocator/models/town.py
"""Town result model"""
from typing import List, Dict, Any, Tuple
from decor_allocator.models.decoration import Decoration


class TownResult:
    """Running channel totals and assignment events for one town"""

    def __init__(self, town: str):
        self.town = town
        self.green: int = 0
        self.blue: int = 0
        self.red: int = 0
        self.decorations: List[Dict[str, Any]] = []
        self.toppers: List[str] = []

    @property
    def totals(self) -> Tuple[int, int, int]:
        return (self.green, self.blue, self.red)

    @property
    def is_empty(self) -> bool:
        return not self.decorations

    def fits(self, decoration: Decoration, cap: int) -> bool:
        """Check if one more unit keeps every channel within cap"""
        return (self.green + decoration.green <= cap and
                self.blue + decoration.blue <= cap and
                self.red + decoration.red <= cap)

    def add(self, decoration: Decoration, topper: bool = False) -> None:
        """Record one unit of decoration"""
        self.green += decoration.green
        self.blue += decoration.blue
        self.red += decoration.red
        self.decorations.append({'name': decoration.name, 'quantity': 1})
        if topper:
            self.toppers.append(decoration.name)

    def balance_with(self, decoration: Decoration) -> int:
        """Pairwise channel spread if one unit of decoration were added"""
        green = self.green + decoration.green
        blue = self.blue + decoration.blue
        red = self.red + decoration.red
        return abs(green - blue) + abs(green - red) + abs(blue - red)

    def count(self, name: str) -> int:
        return sum(d['quantity'] for d in self.decorations if d['name'] == name)

    def decoration_totals(self) -> Dict[str, int]:
        """Aggregate repeated assignment events into per-name totals"""
        totals: Dict[str, int] = {}
        for event in self.decorations:
            totals[event['name']] = totals.get(event['name'], 0) + event['quantity']
        return totals

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'green': self.green,
            'blue': self.blue,
            'red': self.red,
            'decorations': [dict(d) for d in self.decorations],
        }

    def __repr__(self) -> str:
        return f"TownResult({self.town}, {self.totals}, {len(self.decorations)} items)"
