"""Decoration allocator: spread decorations over towns within heart capacity"""

from .allocation import AllocationEngine, allocate_maximum, allocate_balanced
from .models import Catalog, AllocationRequest, AllocationResult

__all__ = ['AllocationEngine', 'allocate_maximum', 'allocate_balanced',
           'Catalog', 'AllocationRequest', 'AllocationResult']
