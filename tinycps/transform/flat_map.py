"""
Flat map combinator
===================

Monadic bind: each emission produces a new CPS function whose slots are
wired straight into the outer callbacks.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from .._helpers import call_with, shape, slot, with_arity
from .._types import Binder, Callback, CPSFn


def _bound(callback: Callback, binder: Binder | None, callbacks: Sequence[Callback]) -> Callback:
    if binder is None:
        return callback

    def emit(*args: typing.Any) -> None:
        # inner slot j feeds outer slot j, for every emission independently
        call_with(binder(*args), callbacks)

    return emit


def flat_map(*binders: Binder | None) -> Callable[[CPSFn], CPSFn]:
    """
    Bind every slot to a function returning another CPS function.
    
    On emission (a1, a2, ...) on slot i, binder i is called with the whole
    tuple and the CPS function it returns is full-called with the *outer*
    callback list, so results and errors produced downstream land on the
    matching outer slots. Every emission spawns its own inner call; earlier
    inner calls are neither cancelled nor deduplicated.
    
    Example:
        from tinycps import adapt as A
        
        half = lambda n: A.of(n // 2) if n % 2 == 0 else A.up.of_n(1)(f"{n} is odd")
        flat_map(half)(A.of(10))(print, print)  # prints 5
    
    Monadic laws:
    - Left identity: flat_map(f)(of(x)) ≡ f(x)
    - Right identity: flat_map(of)(g) ≡ g
    - Associativity: flat_map(h)(flat_map(f)(g)) ≡ flat_map(lambda *a: flat_map(h)(f(*a)))(g)
    """

    def apply(source: CPSFn) -> CPSFn:
        declared = shape(source)

        def run(*callbacks: Callback) -> None:
            call_with(
                source,
                [_bound(callback, slot(binders, index), callbacks) for index, callback in enumerate(callbacks)],
                declared,
            )

        return with_arity(run, declared.arity)

    return apply


# Alias kept for readers coming from the "chain" vocabulary
chain = flat_map


__all__ = ("flat_map", "chain")
