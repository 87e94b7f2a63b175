"""Allocation logic"""

from .engine import AllocationEngine, allocate_maximum, allocate_balanced
from .maximum import MaximumStrategy
from .balanced import BalancedStrategy
from .validator import AllocationValidator

__all__ = ['AllocationEngine', 'allocate_maximum', 'allocate_balanced',
           'MaximumStrategy', 'BalancedStrategy', 'AllocationValidator']
