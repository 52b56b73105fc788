"""
Combinators for continuation-passing-style functions.

A CPS function takes callbacks instead of returning a value and may call
any of them any number of times with any arguments. Each callback position
(slot) is an independent stream of emissions.

Architecture:
- Free combinators take their arguments first and the CPS function last:
  map_(f)(source), scan(r)(seed)(source)
- CPS wraps a function and exposes the same combinators as fluent methods
- adapt lifts values and kungfu Results in and out of CPS
"""

# Core types
from ._types import Args, Binder, Callback, CPSFn, Predicate, Reducer, Transform

# Internal helpers (for custom combinators)
from . import _helpers

# Adapters
from . import adapt
from .adapt import (
    Emission,
    call,
    catching,
    collect,
    from_result,
    lifted,
    never,
    of,
    of_n,
    to_result,
)

# Transform
from .transform import chain, filter_, flat_map, map_

# Combine
from .combine import ApPolicy, ap, lift, merge

# Stream
from .stream import ScanPolicy, scan

# Composition
from .compose import pipe, pipeline

# Wrapper
from .cps import CPS, wrap

# Errors
from ._errors import NoEmissionError, PoisonedSlotError, SlotIndexError

__all__ = (
    # Types
    "Args",
    "Binder",
    "Callback",
    "CPSFn",
    "Predicate",
    "Reducer",
    "Transform",
    # Internal helpers
    "_helpers",
    # Adapt module (namespace import - preferred)
    "adapt",
    # Adapt functions (direct import)
    "of",
    "of_n",
    "never",
    "from_result",
    "catching",
    "call",
    "lifted",
    "Emission",
    "collect",
    "to_result",
    # Transform
    "map_",
    "filter_",
    "flat_map",
    "chain",
    # Combine
    "ApPolicy",
    "ap",
    "lift",
    "merge",
    # Stream
    "ScanPolicy",
    "scan",
    # Composition
    "pipe",
    "pipeline",
    # Wrapper
    "CPS",
    "wrap",
    # Errors
    "NoEmissionError",
    "PoisonedSlotError",
    "SlotIndexError",
)
