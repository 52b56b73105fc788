"""
Transform combinators
=====================

Per-slot transformation of emissions:
- map_      - функтор: значение -> значение
- filter_   - пропуск эмиссий по предикату
- flat_map  - монада: значение -> CPS функция (alias: chain)
"""

from .filter import filter_
from .flat_map import chain, flat_map
from .map import map_

__all__ = (
    "map_",
    "filter_",
    "flat_map",
    "chain",
)
