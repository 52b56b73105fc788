"""
Map combinator
==============

Functor over every callback slot at once.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import call_with, shape, slot, with_arity
from .._types import Callback, CPSFn, Transform


def _mapped(callback: Callback, transform: Transform | None) -> Callback:
    if transform is None:
        return callback

    def emit(*args: typing.Any) -> None:
        callback(transform(*args))

    return emit


def map_(*transforms: Transform | None) -> Callable[[CPSFn], CPSFn]:
    """
    Transform emissions slot by slot.
    
    Slot i's transform receives the whole argument tuple of each emission
    and its return value becomes the only argument forwarded to callback i.
    Slots without a transform (or with None) pass through untouched.
    
    Example:
        source = lambda on_ok, on_err: on_ok(2, 3)
        
        map_(lambda a, b: a * b)(source)(print, print)  # prints 6
    
    Laws (per slot, observed by emitted sequences):
    - Identity: map_()(g) ≡ g, map_(identity)(g) ≡ g
    - Composition: map_(h)(map_(f)(g)) ≡ map_(lambda *a: h(f(*a)))(g)
    """

    def apply(source: CPSFn) -> CPSFn:
        declared = shape(source)

        def run(*callbacks: Callback) -> None:
            call_with(
                source,
                [_mapped(callback, slot(transforms, index)) for index, callback in enumerate(callbacks)],
                declared,
            )

        return with_arity(run, declared.arity)

    return apply


__all__ = ("map_",)
