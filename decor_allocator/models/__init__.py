"""Data models for decorations, towns and allocation runs"""

from .decoration import Decoration, Catalog
from .pool import QuantityPool
from .town import TownResult
from .request import AllocationRequest, AllocationResult

__all__ = ['Decoration', 'Catalog', 'QuantityPool', 'TownResult',
           'AllocationRequest', 'AllocationResult']
