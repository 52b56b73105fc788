"""
Adapters between plain Python values and CPS functions.

Supports the same import styles as the rest of the library:
    from tinycps import adapt as A   # Recommended
    from tinycps.adapt import of     # Direct

Architecture:
- A.up.*    - подъем значений в CPS (of, of_n, never, from_result, catching)
- A.down.*  - запуск CPS и сбор эмиссий (collect, to_result)
- A.call()  - частичный вызов параметризованных CPS функций

Examples:
    from tinycps import adapt as A
    
    ticks = A.of(1)
    failed = A.up.of_n(1)(TimeoutError())
    
    readings = A.call(read_sensor, "t-1")
    
    A.down.collect(ticks)       # [Emission(slot=0, args=(1,))]
    A.down.to_result(failed)    # Error(TimeoutError())
"""

from __future__ import annotations

from . import down, up
from .call import call, lifted
from .down import Emission, collect, to_result
from .up import catching, from_result, never, of, of_n

__all__ = (
    # Namespaces (A.up.*, A.down.*)
    "up",
    "down",
    # Up
    "of",
    "of_n",
    "never",
    "from_result",
    "catching",
    # Call
    "call",
    "lifted",
    # Down
    "Emission",
    "collect",
    "to_result",
)
