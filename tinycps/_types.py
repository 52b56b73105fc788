"""
Core type definitions for CPS combinators.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Args = argument tuple of a single emission
type Args = tuple[typing.Any, ...]

# Callback = one output slot; called any number of times with any arguments
type Callback = Callable[..., object]

# CPSFn = function that takes callbacks instead of returning a value
# NOTE: Return value is ignored by every combinator.
type CPSFn = Callable[..., object]

# Transform = per-slot mapper, receives the whole argument tuple
type Transform = Callable[..., typing.Any]

# Binder = per-slot transform producing another CPS function
type Binder = Callable[..., CPSFn]

# Predicate = per-slot emission filter
type Predicate = Callable[..., object]

# Reducer = (accumulator, *args) -> new accumulator
type Reducer[S] = Callable[..., S]

__all__ = (
    "Args",
    "Callback",
    "CPSFn",
    "Transform",
    "Binder",
    "Predicate",
    "Reducer",
)
