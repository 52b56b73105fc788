"""
Combining combinators
=====================

- ap, lift - аппликатив: параллельная комбинация источников
- merge    - моноид: объединение потоков эмиссий
"""

from .ap import ApPolicy, ap, lift
from .merge import merge

__all__ = (
    "ApPolicy",
    "ap",
    "lift",
    "merge",
)
