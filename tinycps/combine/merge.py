"""
Merge combinator
================

Monoid over CPS functions: multiplexing of independent emission streams.
"""

from __future__ import annotations

from .._helpers import call_with, shape, with_arity
from .._types import Callback, CPSFn


def merge(*sources: CPSFn) -> CPSFn:
    """
    Full-call every source with the same callback list.
    
    Slot i fires once for every emission any source makes on slot i, with
    that emission's exact arguments, in the order the sources produce them.
    Nothing is buffered, reordered or deduplicated.
    
    Example:
        from tinycps import adapt as A
        
        merge(A.of(1), A.of(2))(print)  # prints 1, then 2
    
    Monoid laws (as multisets of (slot, args) events):
    - Identity: merge(g, never) ≡ merge(never, g) ≡ g
    - Associativity: merge(merge(a, b), c) ≡ merge(a, merge(b, c))
    - Commutativity: merge(a, b) ≡ merge(b, a)
    
    NOTE: merge() with no sources is `never`. The result declares the
          largest slot count among the sources.
    """
    shapes = [(source, shape(source)) for source in sources]

    def run(*callbacks: Callback) -> None:
        for source, declared in shapes:
            call_with(source, callbacks, declared)

    arities = [declared.arity for _, declared in shapes if declared.arity is not None]
    return with_arity(run, max(arities, default=None))


__all__ = ("merge",)
